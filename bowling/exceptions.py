"""Encapsulates all exceptions raised by the bowling scorer."""


class ScoringException(Exception):
    """Base class for all scoring exceptions.

    Attributes:
        error_code: HTTP error code representation of the failure
    """
    error_code = 400


class InvalidArgument(ScoringException):
    """Raised for blank player names, negative points or missing frames."""


class InvalidPinCount(ScoringException):
    def __init__(self, pins):
        super().__init__(
            'The number of pins {} is invalid. '
            'The number must be between 0 and 10.'.format(pins))
        self.pins = pins


class InvalidFrameTotal(ScoringException):
    def __init__(self, first_roll, second_roll):
        super().__init__(
            'Frame {}-{} knocks down more than 10 pins.'.format(
                first_roll, second_roll))


class BonusNotEarned(ScoringException):
    """The bonus roll of the final frame needs a strike or a spare first."""
    def __init__(self, first_roll, second_roll, bonus_roll):
        super().__init__(
            'Bonus roll {} has not been earned by {}-{}.'.format(
                bonus_roll, first_roll, second_roll))


class InvalidFrameSlot(ScoringException):
    """Frames 1 to 9 must be default frames, frame 10 a final frame."""
    def __init__(self, kind, frame):
        super().__init__(
            'A {} frame cannot be played as frame: {}.'.format(kind, frame))


class GameOver(ScoringException):
    def __init__(self, player_name):
        super().__init__(
            'Game:\'{}\' has already been played.'.format(player_name))


class AlreadyScored(ScoringException):
    def __init__(self, frame):
        super().__init__('Score has already been updated for {!r}.'.format(
            frame))


class Underflow(ScoringException):
    error_code = 500

    def __init__(self):
        super().__init__('No rolls are pending.')


class InvalidFrameNotation(ScoringException):
    """Every frame should be written as
       1. 'X' for a strike in frames 1 to 9, and 'X' followed by the two bonus
          rolls in the last frame.
       2. '<0-9>/' for a spare, followed by the bonus roll in the last frame.
       3. '<0-9>-<0-9>' for an open frame.
    """
    def __init__(self, notation, frame):
        super().__init__(
            'Score format: {notation!r} is invalid for frame: {frame}.'.format(
                notation=notation, frame=frame))
