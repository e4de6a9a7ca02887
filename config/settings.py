from pydantic_settings import BaseSettings, SettingsConfigDict

from src.ix_common.enums import SuiNetwork


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Sui fullnode (defaults target public mainnet)
    SUI_NETWORK: SuiNetwork = SuiNetwork.MAINNET
    SUI_RPC_URL: str = "https://fullnode.mainnet.sui.io:443"
    RPC_TIMEOUT_SECONDS: float = 30.0

    # Optional JSON file replacing the bundled address book for SUI_NETWORK
    ADDRESS_BOOK_PATH: str | None = None

    # App
    APP_NAME: str = "Sui Intentions"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
