from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ledgerdash.adapters.ledger_rest import DEFAULT_BACKEND_URL, DEFAULT_RECEIVER_FIELD

ENV_BACKEND_URL = "LEDGERDASH_BACKEND_URL"
ENV_REQUEST_TIMEOUT = "LEDGERDASH_REQUEST_TIMEOUT_S"
ENV_RECEIVER_FIELD = "LEDGERDASH_RECEIVER_FIELD"
ENV_DEBUG = "LEDGERDASH_DEBUG"


@dataclass
class SettingsConfig:
    """Typed runtime settings for the ledger backend connection."""

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout_s: int = 10
    receiver_field: str = DEFAULT_RECEIVER_FIELD


class SettingsVM:
    """Keeps settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``LEDGERDASH_*`` environment variables."""
        env = os.environ if environ is None else environ
        vm = cls()
        payload: Dict[str, Any] = {}
        if env.get(ENV_BACKEND_URL, "").strip():
            payload["backend_url"] = env[ENV_BACKEND_URL]
        if env.get(ENV_REQUEST_TIMEOUT, "").strip():
            payload["request_timeout_s"] = env[ENV_REQUEST_TIMEOUT]
        if env.get(ENV_RECEIVER_FIELD, "").strip():
            payload["receiver_field"] = env[ENV_RECEIVER_FIELD]
        if env.get(ENV_DEBUG, "").strip():
            payload["debug_logging"] = env[ENV_DEBUG]
        vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def backend_url(self) -> str:
        return self.config.backend_url

    @backend_url.setter
    def backend_url(self, value: str) -> None:
        self.config = replace(self.config, backend_url=self._coerce_url(value))

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        coerced = self._coerce_int("request_timeout_s", value)
        self.config = replace(self.config, request_timeout_s=coerced)

    @property
    def receiver_field(self) -> str:
        return self.config.receiver_field

    @receiver_field.setter
    def receiver_field(self, value: str) -> None:
        self.config = replace(self.config, receiver_field=self._coerce_field(value))

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not self.backend_url.startswith(("http://", "https://")):
            return False
        if self.request_timeout_s <= 0:
            return False
        return bool(self.receiver_field)

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "backend_url":
            return self._coerce_url(raw)
        if key == "request_timeout_s":
            return self._coerce_int(key, raw)
        if key == "receiver_field":
            return self._coerce_field(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("backend_url must be a non-empty string.")
        text = value.strip().rstrip("/")
        if "://" not in text:
            text = f"http://{text}"
        return text

    @staticmethod
    def _coerce_field(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("receiver_field must be a non-empty string.")
        return value.strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except ValueError as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if coerced <= 0:
            raise ValueError(f"{name} must be positive.")
        return coerced
