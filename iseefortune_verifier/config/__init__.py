from .params import DEFAULT_VERIFIER_PARAMS, VerifierParams, get_verifier_params
from .settings import (
    CONFIG_ENV_VAR,
    LoggingSettings,
    Settings,
    default_config_path,
    default_vectors_path,
    load_settings,
)

__all__ = [
    "VerifierParams",
    "DEFAULT_VERIFIER_PARAMS",
    "get_verifier_params",
    "CONFIG_ENV_VAR",
    "LoggingSettings",
    "Settings",
    "default_config_path",
    "default_vectors_path",
    "load_settings",
]
