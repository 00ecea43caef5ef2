"""Encapsulates the frame of a ten-pin bowling game."""
import threading

from bowling import exceptions
from bowling import validators


FRAME_KIND_DEFAULT = 'default'
FRAME_KIND_FINAL = 'final'


class Frame:
    """Instance of this class represents the rolls of a single frame.

    A frame is either a default frame (frames 1 to 9) of two rolls, where a
    strike is recorded as (10, 0), or the final frame with a third bonus roll
    that only counts after a strike or a spare. Frames are built through the
    factories `default`, `strike` and `final`, and apart from the score they
    never change once built.

    Attributes:
        kind: FRAME_KIND_DEFAULT or FRAME_KIND_FINAL
        rolls: tuple of the pins knocked down by each roll
    """

    def __init__(self, kind, first_roll, second_roll, bonus_roll=0):
        for pins in (first_roll, second_roll, bonus_roll):
            validators.validate_pins(pins)
        if kind == FRAME_KIND_DEFAULT:
            if bonus_roll:
                raise exceptions.InvalidArgument(
                    'Only the final frame has a bonus roll.')
            validators.validate_frame_total(first_roll, second_roll)
            self._rolls = (first_roll, second_roll)
        elif kind == FRAME_KIND_FINAL:
            validators.validate_bonus_roll(first_roll, second_roll, bonus_roll)
            self._rolls = (first_roll, second_roll, bonus_roll)
        else:
            raise exceptions.InvalidArgument(
                'Unknown frame kind: {!r}.'.format(kind))
        self._kind = kind
        self._score = None
        self._lock = threading.Lock()

    @classmethod
    def default(cls, first_roll, second_roll):
        return cls(FRAME_KIND_DEFAULT, first_roll, second_roll)

    @classmethod
    def strike(cls):
        """Returns the canonical strike, i.e. a (10, 0) default frame."""
        return cls(FRAME_KIND_DEFAULT, validators.MAX_PINS, 0)

    @classmethod
    def final(cls, first_roll, second_roll, bonus_roll=0):
        return cls(FRAME_KIND_FINAL, first_roll, second_roll, bonus_roll)

    has_earned_bonus_roll = staticmethod(validators.has_earned_bonus_roll)

    def copy(self):
        """Returns an unscored frame with the same kind and rolls."""
        return Frame(self._kind, *self._rolls)

    @property
    def kind(self):
        return self._kind

    @property
    def is_final(self):
        return self._kind == FRAME_KIND_FINAL

    @property
    def rolls(self):
        return self._rolls

    @property
    def first_roll(self):
        return self._rolls[0]

    @property
    def second_roll(self):
        return self._rolls[1]

    @property
    def bonus_roll(self):
        """Pins of the bonus roll of the final frame; None otherwise."""
        return self._rolls[2] if self.is_final else None

    @property
    def total(self):
        return sum(self._rolls)

    @property
    def is_zero(self):
        return self.total == 0

    @property
    def is_strike(self):
        return self.first_roll == validators.MAX_PINS

    @property
    def is_spare(self):
        return (not self.is_strike and
                self.first_roll + self.second_roll == validators.MAX_PINS)

    @property
    def is_open(self):
        # A zero frame is an open frame as well.
        return not self.is_strike and not self.is_spare

    @property
    def is_turkey(self):
        return self.is_final and all(
            pins == validators.MAX_PINS for pins in self._rolls)

    @property
    def has_score(self):
        return self._score is not None

    @property
    def score(self):
        """Cumulative score at the end of this frame, None until resolved."""
        return self._score

    def update_score(self, start, bonus=0):
        """Sets the cumulative score of the frame.

        The score of a default frame is the starting points plus the pins of
        the frame plus the bonus earned by a strike or a spare. The bonus of
        the final frame is already part of its total.

        Args:
            start: cumulative score of the previous frame
            bonus: bonus points earned from the following rolls

        Raises:
            InvalidArgument: if the points are negative, or a bonus is given
                to the final frame
            AlreadyScored: if the score has been set before
        """
        validators.validate_points(start, bonus)
        if self.is_final and bonus:
            raise exceptions.InvalidArgument(
                'The final frame does not take bonus points.')
        with self._lock:
            if self._score is not None:
                raise exceptions.AlreadyScored(self)
            self._score = start + self.total + bonus
        return self._score

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self._kind == other._kind and self._rolls == other._rolls

    def __hash__(self):
        return hash((self._kind, self._rolls))

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, {
            'kind': self._kind, 'rolls': self._rolls, 'score': self._score})
