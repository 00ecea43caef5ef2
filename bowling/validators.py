"""Encapsulates the validation rules shared by frames, rolls and games."""

from bowling import exceptions


MAX_PINS = 10
MAX_FRAMES = 10


def validate_pins(value):
    """Validates the number of pins knocked down by a single roll."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise exceptions.InvalidPinCount(value)
    if value < 0 or value > MAX_PINS:
        raise exceptions.InvalidPinCount(value)


def validate_frame_total(first_roll, second_roll):
    """Validates that the two rolls of a default frame fit in one rack."""
    if first_roll + second_roll > MAX_PINS:
        raise exceptions.InvalidFrameTotal(first_roll, second_roll)


def has_earned_bonus_roll(first_roll, second_roll):
    """Returns True if the final frame opens with a strike or a spare."""
    return first_roll == MAX_PINS or first_roll + second_roll == MAX_PINS


def validate_bonus_roll(first_roll, second_roll, bonus_roll):
    if bonus_roll > 0 and not has_earned_bonus_roll(first_roll, second_roll):
        raise exceptions.BonusNotEarned(first_roll, second_roll, bonus_roll)


def validate_points(start, bonus):
    """Validates the starting and the bonus points of a frame score."""
    if start is None or start < 0:
        raise exceptions.InvalidArgument(
            'Starting points cannot be negative: {}.'.format(start))
    if bonus is None or bonus < 0:
        raise exceptions.InvalidArgument(
            'Bonus points cannot be negative: {}.'.format(bonus))


def validate_player_name(value):
    if not isinstance(value, str) or not value.strip():
        raise exceptions.InvalidArgument('Player name is required.')


def validate_frame_slot(frame, number_of_played_frames):
    """Validates that the frame may be played after the given frames.

    Args:
        frame: the frame to be appended
        number_of_played_frames: integer; number of frames already played
    """
    frame_number = number_of_played_frames + 1
    if frame.is_final != (frame_number == MAX_FRAMES):
        raise exceptions.InvalidFrameSlot(frame.kind, frame_number)
