"""
Logger facade

    Logger.base.info('...')        plain messages
    @Logger.io                     args/return at DEBUG, failures at ERROR
    @Logger.io(truncate_content=False)

CustomBaseError subclasses are expected outcomes (validation, duplicates, 404s), so they
are logged without a traceback. Anything else gets the full traceback, once, at the
innermost decorated frame.
"""

from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, call_depth_var, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])

_LOGGED_FLAG = '_has_logged'


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}
        self.depth = 2  # Skip this class and the wrapper

    def _bound(self) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth)

    def _enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound().debug(f'args: {self.masked(args)}, kwargs: {self.masked(kwargs)}')

    def _exit(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._bound().debug(f'return: {self.masked(return_value)}')

    def _fail(self, e: Exception) -> None:
        if getattr(e, _LOGGED_FLAG, False):
            return
        try:
            setattr(e, _LOGGED_FLAG, True)
        except AttributeError:
            pass

        if isinstance(e, CustomBaseError):
            self._bound().error(f'{type(e).__name__}({e.status_code}): {e.message}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')

    def masked(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed: Any = {
                key: self.masked(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed = type(data)(self.masked(item) for item in data)
        else:
            processed = mask_sensitive(data)

        return truncate_content(processed) if self.truncate_content else processed

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        # Tracebacks point at loguru's own frames instead of this wrapper
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self._enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await func(*args, **kwargs)
                    self._exit(return_value)
                    return return_value
                except Exception as e:
                    self._fail(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self._enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self._exit(return_value)
                return return_value
            except Exception as e:
                self._fail(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
