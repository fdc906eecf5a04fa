"""Settings resolution for the Przelewy24 SDK.

Credentials come from up to three places and are merged field by field,
first non-empty value wins:

1. site-level settings supplied by the host application (``SiteSettings``),
   a named account first, then the site defaults;
2. process configuration (``Przelewy24Settings``, read from ``PRZELEWY24_*``
   environment variables or a ``.env`` file), again account first;
3. sandbox constants (``SandboxDefaults``), only while sandbox fallbacks
   are enabled.

Missing values are not an error until an operation needs them, see
``EffectiveSettings.require_signing`` and ``EffectiveSettings.require_auth``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.errors import ConfigurationError

logger = logging.getLogger(__name__)

SANDBOX_BASE_URL = "https://sandbox.przelewy24.pl/api/v1/"
PRODUCTION_BASE_URL = "https://secure.przelewy24.pl/api/v1/"


class AccountSettings(BaseModel):
    """Credentials for one Przelewy24 account. Every field is optional."""

    model_config = ConfigDict(extra="ignore")

    client_id: Optional[str] = None
    merchant_id: Optional[int] = None
    pos_id: Optional[int] = None
    crc_key: Optional[str] = None
    report_key: Optional[str] = None
    secret_id: Optional[str] = None
    base_url: Optional[str] = None
    use_sandbox_fallbacks: Optional[bool] = None


class SiteSettings(AccountSettings):
    """Site-level settings owned by the host application's settings store."""

    default_account_key: str = "default"
    accounts: Dict[str, AccountSettings] = Field(default_factory=dict)


class Przelewy24Settings(BaseSettings):
    """Process configuration.

    Examples::

        PRZELEWY24_MERCHANT_ID=12345
        PRZELEWY24_CRC_KEY=...
        PRZELEWY24_ACCOUNTS__SHOP2__CRC_KEY=...
    """

    client_id: Optional[str] = None
    merchant_id: Optional[int] = None
    pos_id: Optional[int] = None
    crc_key: Optional[str] = None
    report_key: Optional[str] = None
    secret_id: Optional[str] = None
    base_url: Optional[str] = None
    use_sandbox_fallbacks: Optional[bool] = None
    default_account_key: str = "default"
    accounts: Dict[str, AccountSettings] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix="PRZELEWY24_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def load_settings(env_file: str | None = None) -> Przelewy24Settings:
    """Load Przelewy24Settings once per process.

    Raises:
        ConfigurationError: if a PRZELEWY24_* value cannot be parsed
    """
    env_path = Path(env_file) if env_file else None
    try:
        if env_path is None:
            return Przelewy24Settings()
        return Przelewy24Settings(_env_file=env_path)
    except PydanticValidationError as e:
        invalid = sorted({".".join(str(part) for part in error["loc"]) for error in e.errors()})
        logger.warning("Invalid Przelewy24 process settings: %s", ", ".join(invalid))
        raise ConfigurationError(
            f"Przelewy24 {', '.join(invalid)} invalid",
            missing=invalid,
        ) from e


@dataclass(frozen=True)
class SandboxDefaults:
    """Fallback values for local testing against the sandbox.

    Replace in production, or disable with ``use_sandbox_fallbacks=False``.
    """

    crc_key: str = "yourSandboxCrcKey"
    report_key: str = "yourSandboxReportKey"
    base_url: str = SANDBOX_BASE_URL
    use_sandbox_fallbacks: bool = True


class SigningCredentials(NamedTuple):
    merchant_id: int
    pos_id: int
    crc_key: str


class AuthCredentials(NamedTuple):
    pos_id: str
    key: str


@dataclass(frozen=True)
class EffectiveSettings:
    """Credentials and endpoint for a single API call."""

    base_url: str
    use_sandbox_fallbacks: bool = True
    client_id: Optional[str] = None
    merchant_id: Optional[int] = None
    pos_id: Optional[int] = None
    crc_key: Optional[str] = None
    report_key: Optional[str] = None
    secret_id: Optional[str] = None
    account: Optional[str] = None

    def require_signing(self, operation: Optional[str] = None) -> SigningCredentials:
        """Values needed to sign a request.

        Raises:
            ConfigurationError: if merchant id, POS id or CRC key is absent
        """
        missing = []
        if self.merchant_id is None:
            missing.append("merchant_id")
        if self.pos_id is None:
            missing.append("pos_id")
        if not self.crc_key:
            missing.append("crc_key")
        if missing:
            raise ConfigurationError(
                f"Przelewy24 {', '.join(missing)} not configured",
                missing=missing,
                operation=operation,
            )
        return SigningCredentials(self.merchant_id, self.pos_id, self.crc_key)

    def require_auth(self, operation: Optional[str] = None) -> AuthCredentials:
        """Basic-auth user and password.

        The secret id is preferred over the report key when both are set.

        Raises:
            ConfigurationError: if POS id or both keys are absent
        """
        missing = []
        if self.pos_id is None:
            missing.append("pos_id")
        key = self.secret_id or self.report_key
        if not key:
            missing.append("report_key")
        if missing:
            raise ConfigurationError(
                f"Przelewy24 {', '.join(missing)} not configured",
                missing=missing,
                operation=operation,
            )
        return AuthCredentials(str(self.pos_id), key)


def ensure_trailing_slash(url: str) -> str:
    return url.rstrip("/") + "/"


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, int):
        return value != 0
    return True


def _first(layers: List[Any], name: str) -> Any:
    for layer in layers:
        value = getattr(layer, name, None)
        if _present(value):
            return value
    return None


def _merchant_id(layers: List[Any]) -> Optional[int]:
    # merchant_id first, then the legacy client_id alias, layer by layer
    for layer in layers:
        merchant_id = getattr(layer, "merchant_id", None)
        if _present(merchant_id):
            return merchant_id
        client_id = getattr(layer, "client_id", None)
        if _present(client_id) and client_id.strip().isdigit():
            return int(client_id.strip())
    return None


SiteSettingsSource = Union[SiteSettings, Dict[str, Any], Callable[[], Optional[SiteSettings]], None]


class SettingsResolver:
    """Builds ``EffectiveSettings`` from site, process and sandbox sources.

    Args:
        site_settings: a ``SiteSettings``, a dict, or a callable returning
            one; a callable is invoked on every ``resolve``
        process_settings: process configuration; ``load_settings()`` when None
        sandbox: named sandbox fallbacks
    """

    def __init__(
        self,
        site_settings: SiteSettingsSource = None,
        process_settings: Optional[Przelewy24Settings] = None,
        sandbox: Optional[SandboxDefaults] = None,
    ) -> None:
        self._site_settings = site_settings
        self._process_settings = process_settings
        self._sandbox = sandbox or SandboxDefaults()

    def _site(self) -> Optional[SiteSettings]:
        source = self._site_settings
        if callable(source):
            source = source()
        if source is None or isinstance(source, SiteSettings):
            return source
        return SiteSettings.model_validate(source)

    def _process(self) -> Przelewy24Settings:
        if self._process_settings is not None:
            return self._process_settings
        return load_settings()

    def resolve(self, account: Optional[str] = None) -> EffectiveSettings:
        """Merge all sources into the settings for one call."""
        site = self._site()
        process = self._process()

        account_key = account or (site.default_account_key if site else None) or process.default_account_key
        layers: List[Any] = []
        if site is not None:
            if account_key in site.accounts:
                layers.append(site.accounts[account_key])
            layers.append(site)
        if account_key in process.accounts:
            layers.append(process.accounts[account_key])
        layers.append(process)

        use_sandbox = _first(layers, "use_sandbox_fallbacks")
        if use_sandbox is None:
            use_sandbox = self._sandbox.use_sandbox_fallbacks

        merchant_id = _merchant_id(layers)
        pos_id = _first(layers, "pos_id") or merchant_id
        crc_key = _first(layers, "crc_key")
        report_key = _first(layers, "report_key")
        if use_sandbox:
            crc_key = crc_key or self._sandbox.crc_key
            report_key = report_key or self._sandbox.report_key

        base_url = _first(layers, "base_url") or self._sandbox.base_url

        settings = EffectiveSettings(
            base_url=ensure_trailing_slash(base_url.strip()),
            use_sandbox_fallbacks=use_sandbox,
            client_id=_first(layers, "client_id"),
            merchant_id=merchant_id,
            pos_id=pos_id,
            crc_key=crc_key,
            report_key=report_key,
            secret_id=_first(layers, "secret_id"),
            account=account_key,
        )
        logger.debug(
            "Resolved Przelewy24 settings (account=%s, base_url=%s, merchant_id=%s, sandbox_fallbacks=%s)",
            account_key,
            settings.base_url,
            merchant_id,
            use_sandbox,
        )
        return settings


def resolve_settings(
    site_settings: SiteSettingsSource = None,
    process_settings: Optional[Przelewy24Settings] = None,
    sandbox: Optional[SandboxDefaults] = None,
    account: Optional[str] = None,
) -> EffectiveSettings:
    """One-shot helper around ``SettingsResolver``."""
    return SettingsResolver(site_settings, process_settings, sandbox).resolve(account)
