from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Every settings group reads the flat env vars (and .env) named by its aliases
_ENV_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = _ENV_CONFIG

    name: str = Field("Based DAO Participation", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, validation_alias="LOG_FILE")


class ChainSettings(BaseSettings):
    """Settings related to the Base node connection and the signing account."""

    model_config = _ENV_CONFIG

    rpc_url: str = Field(
        default="https://mainnet.base.org",
        validation_alias="BASE_RPC_URL",
        description="Base JSON-RPC URL",
    )
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")
    # How long to wait for a submitted transaction to be mined (seconds)
    receipt_timeout: int = Field(default=180, gt=0, validation_alias="RECEIPT_TIMEOUT")
    # Cap on concurrent reads when walking every proposal
    max_concurrent_requests: int = Field(default=5, gt=0, validation_alias="MAX_CONCURRENT_REQUESTS")
    private_key: Optional[SecretStr] = Field(default=None, validation_alias="PRIVATE_KEY")


class DaoSettings(BaseSettings):
    """Contract addresses and the constants the DAO contracts do not expose."""

    model_config = _ENV_CONFIG

    governor_address: str = Field(
        default="0x1b20dcfdf520176cfab22888f07ea3419d15779d", validation_alias="GOVERNOR_ADDRESS"
    )
    token_address: str = Field(
        default="0x10a5676ec8ae3d6b1f36a6f1a1526136ba7938bf", validation_alias="TOKEN_ADDRESS"
    )
    # Resolved from the token's minter() when not set
    auction_house_address: Optional[str] = Field(default=None, validation_alias="AUCTION_HOUSE_ADDRESS")

    seconds_per_block: int = Field(default=2, gt=0, validation_alias="SECONDS_PER_BLOCK")

    extension_window_seconds: int = Field(default=900, ge=0, validation_alias="AUCTION_EXTENSION_WINDOW")
    extension_duration_seconds: int = Field(default=600, ge=0, validation_alias="AUCTION_EXTENSION_DURATION")

    vote_gas_limit: int = Field(default=250_000, gt=0, validation_alias="VOTE_GAS_LIMIT")
    vote_with_reason_gas_limit: int = Field(default=300_000, gt=0, validation_alias="VOTE_WITH_REASON_GAS_LIMIT")
    # Estimated by the node when not set
    bid_gas_limit: Optional[int] = Field(default=None, gt=0, validation_alias="BID_GAS_LIMIT")

    proposal_url_base: str = Field(
        default="https://nouns.build/dao/base/0x10a5676ec8ae3d6b1f36a6f1a1526136ba7938bf/vote",
        validation_alias="PROPOSAL_URL_BASE",
    )


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Uses validation_alias in sub-models to map flat env vars to nested structure.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    chain: ChainSettings = Field(default_factory=ChainSettings)
    dao: DaoSettings = Field(default_factory=DaoSettings)

    model_config = _ENV_CONFIG


# Singleton instance
settings = Settings()
