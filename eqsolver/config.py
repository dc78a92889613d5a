"""Quoter configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoterConfig:
    """Configuration for the quoting service.

    Attributes:
        max_batch_size: Largest number of quotes accepted in one batch request
        log_rejections: If True, log every quote the solver rejects
    """

    max_batch_size: int = 1000
    log_rejections: bool = True


# Default configuration instance
DEFAULT_QUOTER_CONFIG = QuoterConfig()
