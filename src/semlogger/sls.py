"""SLS (Simple Log Service) backend for Alibaba Cloud."""

import hashlib
import json
import os
import secrets
import socket
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .diagnostics import ops_logger
from .environment import HostEnvironment
from .logger import SemanticLogger
from .payload import LogPayload


class PackIdGenerator:
    """Thread-safe PackId source: ``<prefix>-<hex sequence>``"""

    _PREFIX_LENGTH = 16

    def __init__(self, prefix: Optional[str] = None) -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self._prefix = (prefix or self._build_prefix()).upper()

    def generate(self) -> str:
        with self._lock:
            self._counter += 1
            sequence = self._counter
        return f"{self._prefix}-{sequence:X}"

    def _build_prefix(self) -> str:
        seed = "|".join(
            [
                socket.gethostname(),
                str(os.getpid()),
                str(time.time_ns()),
                secrets.token_hex(8),
            ]
        )
        digest = hashlib.sha256(seed.encode("utf-8")).hexdigest().upper()
        return digest[: self._PREFIX_LENGTH]


@dataclass
class SLSConfig:
    """Connection settings for an SLS project and logstore"""

    endpoint: str = ""
    access_key_id: str = ""
    access_key_secret: str = ""
    project: str = ""
    logstore: str = ""
    service_name: str = ""

    def is_valid(self) -> bool:
        """Check if all required fields are present"""
        return all(
            [
                self.endpoint,
                self.access_key_id,
                self.access_key_secret,
                self.project,
                self.logstore,
            ]
        )


class SLSClient:
    """
    Makes sure the configured project and logstore exist before the SLS
    backend starts shipping payloads.
    """

    def __init__(self, config: SLSConfig):
        self.config = config
        self._client = None

    @property
    def client(self):
        """The aliyun ``LogClient``, created on first use"""
        if self._client is None:
            try:
                from aliyun.log import LogClient
            except ImportError:
                ops_logger.warning(
                    "aliyun-log-python-sdk not installed, SLS client unavailable"
                )
                return None
            self._client = LogClient(
                endpoint=self.config.endpoint,
                accessKeyId=self.config.access_key_id,
                accessKey=self.config.access_key_secret,
            )
        return self._client

    def ensure_project(self, description: str = "Auto created project") -> bool:
        project = self.config.project
        return self._ensure(
            f"project {project}",
            lambda client: client.get_project(project),
            lambda client: client.create_project(project, description),
            missing="ProjectNotExist",
            existing="ProjectAlreadyExist",
        )

    def ensure_logstore(self, ttl: int = 30, shard_count: int = 2) -> bool:
        """
        Args:
            ttl: Retention in days
            shard_count: Number of shards
        """
        project, logstore = self.config.project, self.config.logstore
        return self._ensure(
            f"logstore {project}/{logstore}",
            lambda client: client.get_logstore(project, logstore),
            lambda client: client.create_logstore(
                project_name=project,
                logstore_name=logstore,
                ttl=ttl,
                shard_count=shard_count,
            ),
            missing="LogStoreNotExist",
            existing="LogStoreAlreadyExist",
        )

    def ensure_logstore_exists(
        self,
        ttl: int = 30,
        shard_count: int = 2,
        project_description: str = "Auto created project",
    ) -> bool:
        """
        Create the project and logstore if they are missing

        Returns:
            bool: Whether the logstore is ready to receive logs
        """
        if not self.config.is_valid():
            ops_logger.warning("SLS configuration is incomplete")
            return False

        try:
            return self.ensure_project(project_description) and self.ensure_logstore(
                ttl, shard_count
            )
        except Exception as e:
            ops_logger.error("Error ensuring SLS logstore exists: {}", e)
            return False

    def _ensure(self, resource: str, lookup, create, missing: str, existing: str) -> bool:
        client = self.client
        if not client:
            return False

        from aliyun.log.logexception import LogException

        try:
            lookup(client)
            return True
        except LogException as e:
            if missing not in str(e):
                raise

        try:
            create(client)
        except LogException as e:
            if existing not in str(e):
                ops_logger.error("Error creating SLS {}: {}", resource, e)
                return False
        ops_logger.info("SLS {} ready", resource)
        return True


class SLSSemanticLogger(SemanticLogger):
    """
    Ships each payload to SLS as one log item with a nanosecond timestamp.
    The payload's ``table`` is the logstore name.
    """

    def __init__(
        self,
        client,
        config: SLSConfig,
        log_item_cls,
        put_logs_request_cls,
        log_exception_cls,
        name: str = "",
        environment: Optional[HostEnvironment] = None,
    ) -> None:
        super().__init__(name=name, table=config.logstore, environment=environment)
        self._client = client
        self._config = config
        self._LogItem = log_item_cls
        self._PutLogsRequest = put_logs_request_cls
        self._LogException = log_exception_cls
        self._lock = threading.Lock()
        self._pack_id_generator = PackIdGenerator()

    def write(self, payload: LogPayload) -> None:
        if not self._client:
            return

        try:
            log_item = self._LogItem()
            seconds, nano_part = self._resolve_timestamp(payload)
            log_item.set_time(seconds)
            if hasattr(log_item, "set_time_nano_part"):
                log_item.set_time_nano_part(nano_part)

            log_item.set_contents(self._to_content_pairs(self._build_contents(payload)))

            request = self._PutLogsRequest(
                self._config.project,
                self._config.logstore,
                logitems=[log_item],
            )
            self._attach_pack_id(request, self._pack_id_generator.generate())

            with self._lock:
                self._client.put_logs(request)

        except self._LogException as exc:  # type: ignore[misc]
            ops_logger.warning(
                "Failed to put logs to SLS project={} logstore={}: {}",
                self._config.project,
                self._config.logstore,
                exc,
            )
        except Exception as exc:  # noqa: BLE001 - backend errors stay in the backend
            ops_logger.warning("Unexpected error while sending payload to SLS: {}", exc)

    def _build_contents(self, payload: LogPayload) -> Dict[str, str]:
        contents = {
            key: self._serialize_value(value)
            for key, value in payload.to_dict().items()
        }
        contents["levelname"] = payload.level.display_name
        if payload.backtrace:
            contents["exception"] = payload.exception()
        if self._config.service_name:
            contents["service"] = self._config.service_name
        return contents

    @staticmethod
    def _serialize_value(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value)
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return repr(value)

    @staticmethod
    def _to_content_pairs(contents: Dict[str, str]) -> List[Tuple[str, str]]:
        return [(key, str(value)) for key, value in contents.items() if value is not None]

    @staticmethod
    def _resolve_timestamp(payload: LogPayload) -> Tuple[int, int]:
        if payload.time is not None:
            created = payload.time.timestamp()
            seconds = int(created)
            nano_part = payload.time.microsecond * 1_000
            return seconds, nano_part

        now_ns = time.time_ns()
        return now_ns // 1_000_000_000, now_ns % 1_000_000_000

    def _attach_pack_id(self, request, pack_id: str) -> None:
        tag_payload = [("__pack_id__", pack_id)]

        for setter_name in ("set_logtags", "set_log_tags"):
            setter = getattr(request, setter_name, None)
            if callable(setter):
                setter(tag_payload)
                return

        if hasattr(request, "logtags"):
            request.logtags = tag_payload
            return

        request.log_tags = tag_payload

    @classmethod
    def create(
        cls,
        config: SLSConfig,
        name: str = "",
        environment: Optional[HostEnvironment] = None,
    ) -> Optional["SLSSemanticLogger"]:
        """Create the SLS backend if the configuration is usable"""
        if not config.is_valid():
            return None

        try:
            from aliyun.log import LogItem, PutLogsRequest
            from aliyun.log.logexception import LogException
        except ImportError:
            ops_logger.warning(
                "aliyun-log-python-sdk>=0.8.11 is required for the SLS backend"
            )
            return None

        try:
            client_wrapper = SLSClient(config)
            if not client_wrapper.ensure_logstore_exists():
                return None

            client = client_wrapper.client
            if not client:
                return None

            return cls(
                client,
                config,
                LogItem,
                PutLogsRequest,
                LogException,
                name=name,
                environment=environment,
            )
        except Exception as exc:
            ops_logger.error("Failed to create SLS backend: {}", exc)
            return None
