from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass(slots=True)
class RepeatingTimer:
	"""Cancellable repeating task driven by elapsed time.

	The owner feeds wall-clock deltas through :meth:`advance`; ``callback`` is
	invoked once for every whole ``interval`` that has elapsed. Once
	cancelled (by the owner or from inside the callback) the timer never
	fires again.
	"""

	interval: float
	callback: Callable[[], None] = field(repr=False)

	_elapsed: float = field(init=False, default=0.0, repr=False)
	_cancelled: bool = field(init=False, default=False)
	_fired: int = field(init=False, default=0)

	def __post_init__(self) -> None:
		if self.interval <= 0.0:
			raise ValueError("interval must be positive")

	def advance(self, dt: float) -> int:
		"""Accumulate ``dt`` seconds and fire for each completed interval."""
		if self._cancelled or dt <= 0.0:
			return 0
		self._elapsed += float(dt)
		fired = 0
		while not self._cancelled and self._elapsed >= self.interval:
			self._elapsed -= self.interval
			self._fired += 1
			fired += 1
			self.callback()
		return fired

	def cancel(self) -> None:
		self._cancelled = True
		self._elapsed = 0.0

	@property
	def active(self) -> bool:
		return not self._cancelled

	@property
	def fired(self) -> int:
		return self._fired
