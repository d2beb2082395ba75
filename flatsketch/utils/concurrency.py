""" Helpers for running independent upstream calls together """
from __future__ import annotations

from typing import Any, Awaitable, Callable

import anyio


async def gather_fail_fast(*calls: Callable[[], Awaitable[Any]]) -> list[Any]:
    """
    Запускает вызовы параллельно в одной task group и возвращает результаты
    в порядке передачи. Первая ошибка отменяет остальные и пробрасывается как есть
    (без ExceptionGroup).
    """
    results: list[Any] = [None] * len(calls)
    errors: list[Exception] = []

    async with anyio.create_task_group() as tg:

        async def _run(index: int, call: Callable[[], Awaitable[Any]]) -> None:
            try:
                results[index] = await call()
            except Exception as exc:
                if not errors:
                    errors.append(exc)
                tg.cancel_scope.cancel()

        for index, call in enumerate(calls):
            tg.start_soon(_run, index, call)

    if errors:
        raise errors[0]
    return results
