"""Configuration management for the gardenctl application."""
import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Settings:
    """Application settings with sensible defaults."""

    # Location of the gardenctl configuration file
    GCTL_HOME: str = os.getenv("GCTL_HOME", os.path.join("~", ".garden"))
    GCTL_CONFIG_NAME: str = os.getenv("GCTL_CONFIG_NAME", "gardenctl-v2.yaml")

    # ConfigMap in the garden cluster that is downloaded on add-garden
    CLUSTER_CONFIG_NAME: str = os.getenv("CLUSTER_CONFIG_NAME", "clusterconfig")
    CLUSTER_CONFIG_NAMESPACE: str = os.getenv("CLUSTER_CONFIG_NAMESPACE", "gardenctl-system")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def config_file(cls) -> str:
        """Path of the gardenctl configuration file."""
        return os.path.expanduser(os.path.join(cls.GCTL_HOME, cls.GCTL_CONFIG_NAME))
