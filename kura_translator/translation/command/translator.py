# kura_translator/translation/command/translator.py
"""
Command reply translation.

Command replies carry no body: the execution result travels in metrics.
"""
import logging
from typing import Any, Dict, Optional

from kura_translator.models.device import CommandResponsePayload, DeviceCommandOutput
from ..envelope import ResponseEnvelope
from ..exceptions import PayloadValidationError

logger = logging.getLogger(__name__)

STDOUT_METRIC = "command.stdout"
STDERR_METRIC = "command.stderr"
EXIT_CODE_METRIC = "command.exit.code"
TIMED_OUT_METRIC = "command.timedout"
EXCEPTION_MESSAGE_METRIC = "command.exception.message"
EXCEPTION_STACK_METRIC = "command.exception.stack"

COMMAND_METRICS = (
    STDOUT_METRIC, STDERR_METRIC, EXIT_CODE_METRIC,
    TIMED_OUT_METRIC, EXCEPTION_MESSAGE_METRIC, EXCEPTION_STACK_METRIC,
)


def _str_metric(metrics: Dict[str, Any], name: str) -> Optional[str]:
    value = metrics.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PayloadValidationError(name, f"expected a string, got {type(value).__name__}")
    return value


def _exit_code(metrics: Dict[str, Any]) -> Optional[int]:
    value = metrics.get(EXIT_CODE_METRIC)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadValidationError(EXIT_CODE_METRIC, f"expected an integer, got {value!r}")
    return value


def translate_command_body(envelope: ResponseEnvelope) -> CommandResponsePayload:
    metrics = envelope.metrics
    if not any(name in metrics for name in COMMAND_METRICS):
        logger.debug("Command reply without command metrics")
        return CommandResponsePayload(**envelope.payload_fields())

    timed_out = metrics.get(TIMED_OUT_METRIC, False)
    if not isinstance(timed_out, bool):
        raise PayloadValidationError(TIMED_OUT_METRIC, f"expected a boolean, got {timed_out!r}")

    output = DeviceCommandOutput(
        stdout=_str_metric(metrics, STDOUT_METRIC),
        stderr=_str_metric(metrics, STDERR_METRIC),
        exit_code=_exit_code(metrics),
        has_timed_out=timed_out,
        exception_message=_str_metric(metrics, EXCEPTION_MESSAGE_METRIC),
        exception_stack=_str_metric(metrics, EXCEPTION_STACK_METRIC),
    )
    if output.exit_code is None and output.exception_message is None and not output.has_timed_out:
        raise PayloadValidationError(EXIT_CODE_METRIC, "missing and no exception or timeout reported")

    return CommandResponsePayload(**envelope.payload_fields(), command_output=output)
