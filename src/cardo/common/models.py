"""Common models used across Cardo."""

from typing import Literal

from pydantic import BaseModel

from cardo.constants import APP_NAME, MANIFEST_FILENAME, VERSION


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = VERSION
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    global_config_filename: str = "config.yaml"
    manifest_filename: str = MANIFEST_FILENAME
    logs_dir_name: str = "logs"
