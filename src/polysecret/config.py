"""Run configuration for the command line."""

from dataclasses import dataclass

DEFAULT_INPUT = 'input.json'


@dataclass(frozen=True)
class RecoverConfig:
    """
    Attributes:
        input_path: JSON document to read (default input.json)
        log_level: Logging level name for stderr output (default WARNING)
    """
    input_path: str = DEFAULT_INPUT
    log_level: str = 'WARNING'

    @classmethod
    def from_args(cls, args) -> 'RecoverConfig':
        verbose = getattr(args, 'verbose', 0) or 0
        if verbose >= 2:
            level = 'DEBUG'
        elif verbose == 1:
            level = 'INFO'
        else:
            level = cls.log_level
        return cls(input_path=args.input or DEFAULT_INPUT, log_level=level)
