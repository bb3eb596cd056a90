"""
@Logger.io: trace calls of fixture operations

    @Logger.io
    def get_bundle(self, name: str) -> Bundle: ...

    @Logger.io(truncate_content=True)
    def load(self, persister, fixtures): ...

Arguments and return values are logged at DEBUG (only when DEBUG is on),
nested wrapped calls are indented with DEPTH_LINE. Errors are logged once,
at the innermost wrapped call, then re-raised: CustomBaseError without a
traceback, anything else with one.
"""

from functools import wraps
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from fixture_context.platform.config.core_setting import settings
from fixture_context.platform.exception.exceptions import CustomBaseError
from fixture_context.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from fixture_context.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    fetch_layer_depth,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

# Marks an exception already logged by an inner wrapped call
_LOGGED_ATTR = '_fixture_context_logged'


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = ''

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            call_depth_var.set(call_depth_var.get() + 1)
            try:
                if settings.DEBUG:
                    self._debug(f'args: {self.render(args)}, kwargs: {self.render(kwargs)}')
                return_value = func(*args, **kwargs)
                if settings.DEBUG:
                    self._debug(f'return: {self.render(return_value)}')
                return return_value
            except Exception as e:
                self._log_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(wrapper))

    def render(self, data: Any) -> Any:
        """Mask sensitive values, then shorten when truncate_content is set"""
        rendered = self._mask(data)
        return truncate_content(rendered) if self.truncate_content else rendered

    def _mask(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: self._mask(should_mask_keyword(key, value)) for key, value in data.items()}
        if isinstance(data, list | tuple):
            return type(data)(self._mask(item) for item in data)
        return mask_sensitive(data)

    def _bound(self) -> 'LoguruLogger':
        return self._logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: get_chain_start_time(),
            }
        ).opt(depth=2)

    def _debug(self, message: str) -> None:
        self._bound().debug(f'{fetch_layer_depth()}{message}')

    def _log_error(self, error: Exception) -> None:
        if getattr(error, _LOGGED_ATTR, False):
            return
        setattr(error, _LOGGED_ATTR, True)

        message = f'{type(error).__name__}: {error}'
        if isinstance(error, CustomBaseError):
            self._bound().error(message)
        else:
            self._bound().exception(message)

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        # loguru skips its own frames when rendering tracebacks
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._logger.catch).__code__.co_filename
        )
        return func


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(
        func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...
    ) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None,
        *,
        reraise: bool = True,
        truncate_content: bool = False,
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
