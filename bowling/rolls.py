"""Encapsulates the rolls waiting to be converted into frames."""
import collections
import logging

from bowling import exceptions
from bowling import frames
from bowling import validators


class RollBuffer:
    """A holding area for rolls prior to being converted to a frame.

    Rolls are returned in a first in, first out order and are removed only by
    `pop_front`; the strike and spare checks merely peek at the head.
    """

    def __init__(self, rolls=()):
        self._rolls = collections.deque()
        for pins in rolls:
            self.push(pins)

    def push(self, pins):
        validators.validate_pins(pins)
        self._rolls.append(pins)

    def pop_front(self):
        if not self._rolls:
            raise exceptions.Underflow()
        return self._rolls.popleft()

    def peek(self, count=1):
        """Returns up to `count` rolls from the head without removing them."""
        return tuple(self._rolls)[:count]

    def head_is_strike(self):
        return bool(self._rolls) and self._rolls[0] == validators.MAX_PINS

    def head_two_are_spare(self):
        if len(self._rolls) < 2 or self._rolls[0] == validators.MAX_PINS:
            return False
        return self._rolls[0] + self._rolls[1] == validators.MAX_PINS

    @property
    def size(self):
        return len(self._rolls)

    @property
    def total(self):
        return sum(self._rolls)

    @property
    def is_empty(self):
        return not self._rolls

    def __len__(self):
        return len(self._rolls)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, list(self._rolls))


class FrameAssembler:
    """Converts buffered rolls into frames. No scoring is performed."""

    def __init__(self, buffer=None):
        self.buffer = buffer if buffer is not None else RollBuffer()

    @property
    def pending(self):
        return self.buffer.peek(self.buffer.size)

    @property
    def size(self):
        return self.buffer.size

    @property
    def total(self):
        return self.buffer.total

    def has_earned_bonus_roll(self):
        return self.buffer.head_is_strike() or self.buffer.head_two_are_spare()

    def check_roll(self, pins, is_final_slot):
        """Validates a roll against the rolls of the frame being assembled.

        Args:
            pins: integer; the number of pins of the next roll
            is_final_slot: boolean; True if the rolls belong to the final frame

        Raises:
            InvalidPinCount: if the number of pins is out of range
            InvalidFrameTotal: if the roll knocks down more pins than are
                left standing in a default frame
        """
        validators.validate_pins(pins)
        pending = self.pending
        if not is_final_slot and len(pending) == 1:
            validators.validate_frame_total(pending[0], pins)

    def try_assemble(self, is_final_slot):
        """Returns the next frame, or None if more rolls are required.

        A default frame is complete after a strike or two rolls. The final
        frame is complete after two rolls, or three if its first two rolls
        earned the bonus roll. The frame is built before any roll is removed
        from the buffer.
        """
        if is_final_slot:
            frame, count = self._assemble_final_frame()
        else:
            frame, count = self._assemble_default_frame()
        if frame is None:
            return None
        for _ in range(count):
            self.buffer.pop_front()
        logging.debug('Assembled frame %r', frame)
        return frame

    def _assemble_default_frame(self):
        if self.buffer.head_is_strike():
            return frames.Frame.strike(), 1
        if self.buffer.size >= 2:
            return frames.Frame.default(*self.buffer.peek(2)), 2
        return None, 0

    def _assemble_final_frame(self):
        bonus_earned = self.has_earned_bonus_roll()
        if not bonus_earned and self.buffer.size >= 2:
            first_roll, second_roll = self.buffer.peek(2)
            return frames.Frame.final(first_roll, second_roll, 0), 2
        if bonus_earned and self.buffer.size >= 3:
            return frames.Frame.final(*self.buffer.peek(3)), 3
        return None, 0

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.buffer)
