"""
Missing Data Simulator Core - Channel Binder
============================================

Reconciles the configured input channels with the output templates.

Each input channel i feeds output template i. When the two lists differ in
length both are cut to their first min(n, m) entries and a warning of the
form "There are {n} inputs but {m} outputs" is produced. Binding never
fails; the reduced channel set is used for the rest of the adapter's life.

Author: Missing Data Sim Team
Date: October 19, 2026
"""

from typing import NamedTuple, Optional, Sequence, Tuple
import logging

from telemetry.measurement import ChannelKey, Measurement

logger = logging.getLogger(__name__)


class BindingResult(NamedTuple):
    """Aligned channel lists plus the mismatch warning, if any."""
    inputs: Tuple[ChannelKey, ...]
    outputs: Tuple[Measurement, ...]
    warning: Optional[str]


def bind_channels(inputs: Sequence[ChannelKey],
                  outputs: Sequence[Measurement]) -> BindingResult:
    """
    Align input channels with output templates.

    Args:
        inputs: Ordered input channel keys
        outputs: Ordered output templates

    Returns:
        BindingResult with equal-length inputs and outputs

    Example:
        >>> result = bind_channels([a, b, c], [a_out, b_out])
        >>> len(result.inputs), result.warning
        (2, 'There are 3 inputs but 2 outputs')
    """
    n_in = len(inputs)
    n_out = len(outputs)

    if n_in == n_out:
        return BindingResult(tuple(inputs), tuple(outputs), None)

    warning = f"There are {n_in} inputs but {n_out} outputs"
    n = min(n_in, n_out)

    logger.debug(f"Truncating channel lists to {n} pairs")

    return BindingResult(tuple(inputs[:n]), tuple(outputs[:n]), warning)
