"""
F1 Stats API - Configuration Management
Loads settings from environment variables with sensible defaults
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def get_bool(env_var: str, default: str = "false") -> bool:
    """Read a true/false environment flag"""
    return os.getenv(env_var, default).strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# APPLICATION SETTINGS
# =============================================================================
class Config:
    """Base configuration"""

    TESTING = False

    # Flask settings
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    DEBUG = get_bool("FLASK_DEBUG", "true")

    # Server settings
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # CORS: comma separated list, "*" allows everything
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # ==========================================================================
    # REDIS CACHE (Optional - for production)
    # ==========================================================================
    REDIS_URL = os.getenv("REDIS_URL")

    @property
    def USE_REDIS(self) -> bool:
        """Check if Redis is configured"""
        return bool(self.REDIS_URL)

    # ==========================================================================
    # EXTERNAL APIs
    # ==========================================================================
    F1_API_BASE_URL = os.getenv("F1_API_BASE_URL", "https://f1api.dev/api")
    F1_API_TIMEOUT = float(os.getenv("F1_API_TIMEOUT", 10))

    WIKIPEDIA_API_URL = os.getenv("WIKIPEDIA_API_URL", "https://en.wikipedia.org/w/api.php")
    WIKIPEDIA_THUMB_SIZE = int(os.getenv("WIKIPEDIA_THUMB_SIZE", 400))
    IMAGE_REQUEST_TIMEOUT = float(os.getenv("IMAGE_REQUEST_TIMEOUT", 8))

    HTTP_USER_AGENT = os.getenv("HTTP_USER_AGENT", "F1Stats/1.0 (https://f1api.dev)")

    # ==========================================================================
    # BACKGROUND JOBS
    # ==========================================================================
    ENABLE_SCHEDULER = get_bool("ENABLE_SCHEDULER", "false")
    PODIUM_REFRESH_HOURS = int(os.getenv("PODIUM_REFRESH_HOURS", 6))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    FLASK_ENV = "development"


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    FLASK_ENV = "production"

    def __init__(self):
        super().__init__()
        # Validate required production settings
        if not self.SECRET_KEY or self.SECRET_KEY == "dev-secret-key-change-in-production":
            raise ValueError("SECRET_KEY must be set in production!")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True
    FLASK_ENV = "testing"
    REDIS_URL = None
    ENABLE_SCHEDULER = False


# =============================================================================
# CONFIG FACTORY
# =============================================================================
def get_config():
    """Get configuration based on FLASK_ENV"""
    env = os.getenv("FLASK_ENV", "development")

    configs = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig
    }

    config_class = configs.get(env, DevelopmentConfig)
    return config_class()


# Create a global config instance
config = get_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================
def print_config(cfg=None):
    """Print current configuration (for debugging)"""
    cfg = cfg or config
    print("\n" + "="*60)
    print("F1 STATS API - CONFIGURATION")
    print("="*60)
    print(f"Environment:      {cfg.FLASK_ENV}")
    print(f"Debug Mode:       {cfg.DEBUG}")
    print(f"Host:             {cfg.HOST}:{cfg.PORT}")
    print(f"F1 API:           {cfg.F1_API_BASE_URL}")
    print(f"Wikipedia API:    {cfg.WIKIPEDIA_API_URL}")
    print(f"Image Timeout:    {cfg.IMAGE_REQUEST_TIMEOUT}s")
    print(f"Use Redis:        {cfg.USE_REDIS}")
    print(f"Scheduler:        {cfg.ENABLE_SCHEDULER} (every {cfg.PODIUM_REFRESH_HOURS}h)")
    print("="*60 + "\n")


if __name__ == "__main__":
    print_config()
