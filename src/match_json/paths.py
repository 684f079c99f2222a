import os
from pathlib import Path


class Paths:
    @staticmethod
    def root() -> Path:
        """Get the project root directory.

        Can be overridden with MATCH_JSON_ROOT environment variable.
        Defaults to current working directory.
        """
        return Path(os.getenv("MATCH_JSON_ROOT", "."))

    @staticmethod
    def configs() -> Path:
        """Get the directory holding base.yaml and the per-env YAML files.

        Can be overridden with MATCH_JSON_CONFIG_DIR environment variable.
        Defaults to 'configs' relative to project root.
        """
        config_dir_env = os.getenv("MATCH_JSON_CONFIG_DIR")
        if config_dir_env:
            return Path(config_dir_env)
        return Paths.root() / "configs"

    @staticmethod
    def config_for(env: str) -> Path:
        return Paths.configs() / f"{env}.yaml"
