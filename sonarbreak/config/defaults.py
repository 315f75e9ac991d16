from sonarbreak.config.gate import GateConfig
from sonarbreak.config.logs import LoggingConfig

DEFAULT_CONFIG = {
    "gate": GateConfig.default().model_dump(),
    "logging": LoggingConfig().model_dump(),
}
