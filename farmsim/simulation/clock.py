"""
离散时钟：按时刻 1..duration 驱动仿真
"""

from typing import Callable, List


class Clock:
    """
    离散时钟

    每个时刻按注册顺序调用处理器，处理器接收当前时刻作为参数
    """

    def __init__(self, duration: int):
        self.duration = duration
        self.current_tick = 0
        self._tick_handlers: List[Callable[[int], None]] = []

    def register_handler(self, handler: Callable[[int], None]) -> None:
        """
        注册时刻处理器

        Args:
            handler: 处理函数，接收 tick 作为参数
        """
        self._tick_handlers.append(handler)

    def dispatch(self, tick: int) -> None:
        """分发时刻到所有处理器"""
        for handler in self._tick_handlers:
            handler(tick)

    def run(self) -> int:
        """
        运行到结束，不支持中途取消

        Returns:
            已执行的时刻数
        """
        for tick in range(1, self.duration + 1):
            self.current_tick = tick
            self.dispatch(tick)
        return self.current_tick

    def reset(self) -> None:
        """重置时钟（保留已注册的处理器）"""
        self.current_tick = 0

    def __repr__(self) -> str:
        return f"Clock(t={self.current_tick}/{self.duration})"
