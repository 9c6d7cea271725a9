"""
Adapters that let one action run from several entry points.

An action is any object with a ``handle`` method holding the business
logic. Each adapter wraps an action and translates one kind of input into a
``handle`` call, so the logic exists once however it is invoked:

- direct call: ``action.handle(...)``
- request handler: ``ControllerAdapter(action)(request)``
- command line: ``CommandAdapter(action)(argv)``
- deferred job: ``JobAdapter(action, queue).dispatch(...)``

Adapters look for these optional hooks on the action:

``request_model``
    pydantic model the raw request is validated into
``validate_request(data)``
    extra checks on the raw request data, returning a field -> messages
    map; runs even when ``request_model`` rejects the data so every
    failure is reported at once
``request_arguments(request)``
    keyword arguments for ``handle`` built from the request
``to_response(result, request)``
    response returned by the controller
``command_signature`` / ``command_description``
    program name and help text of the command
``configure_command(parser)``
    adds positional arguments and options to an argparse parser
``command_arguments(namespace)``
    keyword arguments for ``handle`` built from parsed arguments
``command_status(result, namespace)``
    status line printed after a successful run
"""
import argparse
import sys
from typing import Any, Dict, List, Mapping, Optional, Protocol, TextIO, Tuple, runtime_checkable

from pydantic import ValidationError as PydanticValidationError

from patterns_demo.application.dto.base import BaseResponse
from patterns_demo.domain.base.exceptions import ValidationError, field_errors
from patterns_demo.infrastructure.jobs.job_queue import Job, JobQueue
from patterns_demo.infrastructure.logging.logger import get_logger


@runtime_checkable
class Action(Protocol):
    """Anything with a ``handle`` method."""

    def handle(self, *args: Any, **kwargs: Any) -> Any:
        ...


def action_name(action: Action) -> str:
    return getattr(action, "command_signature", None) or type(action).__name__


class ActionResponse(BaseResponse):
    """Default controller response."""
    action: str


class ControllerAdapter:
    """Runs an action as a request handler."""

    def __init__(self, action: Action, logger: Any = None):
        if not hasattr(action, "request_arguments"):
            raise TypeError(f"{type(action).__name__} cannot run as a controller: no request_arguments()")
        self._action = action
        self._logger = logger or get_logger(__name__)

    def _parse(self, request: Mapping[str, Any]) -> Tuple[Any, Dict[str, List[str]]]:
        """Validate the request shape. Returns the parsed request and any field errors."""
        model = getattr(self._action, "request_model", None)
        if model is None:
            return request, {}
        try:
            return model.model_validate(dict(request)), {}
        except PydanticValidationError as e:
            return None, field_errors(e)

    def __call__(self, request: Mapping[str, Any]) -> Any:
        """
        Handle an inbound request.

        Raises:
            ValidationError: If the request fails validation, listing every
                failing field; ``handle`` is not called in that case
        """
        parsed, errors = self._parse(request)
        if hasattr(self._action, "validate_request"):
            for field, messages in self._action.validate_request(request).items():
                errors.setdefault(field, []).extend(messages)
        if errors:
            self._logger.warning("Request rejected", action=action_name(self._action), fields=sorted(errors))
            raise ValidationError("The given data was invalid.", errors)
        result = self._action.handle(**self._action.request_arguments(parsed))
        self._logger.debug("Action handled request", action=action_name(self._action))
        if hasattr(self._action, "to_response"):
            return self._action.to_response(result, parsed)
        return ActionResponse(action=action_name(self._action))


class CommandAdapter:
    """Runs an action as a command-line command."""

    def __init__(self, action: Action, stdout: Optional[TextIO] = None, logger: Any = None):
        if not hasattr(action, "command_arguments"):
            raise TypeError(f"{type(action).__name__} cannot run as a command: no command_arguments()")
        self._action = action
        self._stdout = stdout
        self._logger = logger or get_logger(__name__)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=action_name(self._action),
            description=getattr(self._action, "command_description", None),
        )
        if hasattr(self._action, "configure_command"):
            self._action.configure_command(parser)
        return parser

    def __call__(self, argv: List[str]) -> int:
        """Parse ``argv``, run the action and print its status line. Returns the exit code."""
        namespace = self.build_parser().parse_args(argv)
        result = self._action.handle(**self._action.command_arguments(namespace))
        if hasattr(self._action, "command_status"):
            status = self._action.command_status(result, namespace)
        else:
            status = f"{action_name(self._action)} completed."
        print(status, file=self._stdout or sys.stdout)
        self._logger.debug("Action ran as command", action=action_name(self._action))
        return 0


class JobAdapter:
    """Queues an action to run later."""

    def __init__(self, action: Action, queue: JobQueue):
        self._action = action
        self._queue = queue

    def dispatch(self, **kwargs: Any) -> Job:
        return self._queue.dispatch(action_name(self._action), self._action.handle, **kwargs)


def run(action: Action, **kwargs: Any) -> Any:
    """Direct invocation, for symmetry with the other adapters."""
    return action.handle(**kwargs)


__all__: List[str] = [
    'Action',
    'ActionResponse',
    'CommandAdapter',
    'ControllerAdapter',
    'JobAdapter',
    'run',
]
