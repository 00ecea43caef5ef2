"""Encapsulates the game of a single player and the scores of its frames."""
from bowling import exceptions
from bowling import frames as bowling_frames
from bowling import rolls
from bowling import validators


PERFECT_SCORE = 300


class ErrorModel:

    def __init__(self):
        self.errors = []

    def add_error(self, error_object):
        """Appends the error to the list of errors."""
        self.errors.append(error_object)


class Game:
    """Tracks and scores all frames of a ten-pin bowling player.

    Frames are recorded either roll by roll through `roll`, or as complete
    frames through `add_frame`. After every new frame the frames are walked
    from the first one and each frame whose bonus can be resolved receives its
    cumulative score:

    1. an open frame scores its pins;
    2. a spare scores ten plus the pins of the next roll;
    3. a strike scores ten plus the pins of the next two rolls;
    4. the final frame scores all of its pins, its bonus roll included.

    A frame is never scored before the frame preceding it.
    """

    def __init__(self, player_name):
        validators.validate_player_name(player_name)
        self._player_name = player_name
        self._frames = []
        self._assembler = rolls.FrameAssembler()

    @property
    def player_name(self):
        return self._player_name

    @property
    def frames(self):
        return tuple(self._frames)

    @property
    def pending_rolls(self):
        """Rolls that do not belong to a complete frame yet."""
        return self._assembler.pending

    def is_over(self):
        return len(self._frames) == validators.MAX_FRAMES

    def is_final_frame(self):
        """Returns True if the next frame to be played is the final frame."""
        return len(self._frames) == validators.MAX_FRAMES - 1

    def is_perfect(self):
        return self.is_over() and self.score() == PERFECT_SCORE

    def roll(self, pins):
        """Records a single roll.

        Returns:
            the list of frames that were scored because of this roll
        """
        if self.is_over():
            raise exceptions.GameOver(self._player_name)
        self._assembler.check_roll(pins, self.is_final_frame())
        self._assembler.buffer.push(pins)
        updated_frames = []
        while not self.is_over():
            frame = self._assembler.try_assemble(self.is_final_frame())
            if frame is None:
                break
            self._frames.append(frame)
            updated_frames.extend(self.update_score())
        return updated_frames

    def add_frame(self, frame):
        """Records a complete frame.

        A copy of the frame is kept so that the score of the given frame is
        left untouched.

        Returns:
            the list of frames that were scored because of this frame
        """
        if self.is_over():
            raise exceptions.GameOver(self._player_name)
        if not isinstance(frame, bowling_frames.Frame):
            raise exceptions.InvalidArgument('Frame is required.')
        if not self._assembler.buffer.is_empty:
            raise exceptions.InvalidArgument(
                'Rolls {} of frame: {} are still pending.'.format(
                    list(self.pending_rolls), len(self._frames) + 1))
        validators.validate_frame_slot(frame, len(self._frames))
        self._frames.append(frame.copy())
        return self.update_score()

    def update_score(self):
        """Scores every frame whose bonus can be resolved.

        Returns:
            the list of frames that were scored by this call
        """
        updated_frames = []
        for index, frame in enumerate(self._frames):
            if frame.has_score:
                continue
            start = self._frames[index - 1].score if index > 0 else 0
            if start is None:
                break
            if frame.is_final:
                frame.update_score(start)
            else:
                bonus = self._calculate_bonus(index)
                if bonus is None:
                    break
                frame.update_score(start, bonus)
            updated_frames.append(frame)
        return updated_frames

    def _calculate_bonus(self, index):
        """Calculates the bonus of the default frame at the given index.

        Args:
            index: integer; index of a default frame

        Returns:
            the bonus points, or None if the following rolls are not known yet
        """
        frame = self._frames[index]
        following = self._frames[index + 1:index + 3]
        if frame.is_open:
            return 0
        if not following:
            return None
        next_frame = following[0]
        # Spare bonus is the next roll.
        if frame.is_spare:
            return next_frame.first_roll
        # Strike bonus is the next two rolls, over one frame ...
        if next_frame.is_final or not next_frame.is_strike:
            return next_frame.first_roll + next_frame.second_roll
        # ... or over two frames.
        if len(following) == 2:
            return next_frame.first_roll + following[1].first_roll
        return None

    def score(self):
        """Returns the latest cumulative score, 0 if no frame is scored."""
        for frame in reversed(self._frames):
            if frame.has_score:
                return frame.score
        return 0

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, {
            'player_name': self._player_name, 'frames': self._frames,
            'pending_rolls': self.pending_rolls})


class ScoreCard(ErrorModel):
    """Encapsulates a scored game in addition to the errors, if any."""

    def __init__(self, player_name=None, game=None):
        super().__init__()
        self.player_name = player_name
        self.game = game

    @property
    def frames(self):
        if self.game is None:
            return []
        return [
            {'frame': number, 'kind': frame.kind, 'rolls': list(frame.rolls),
             'score': frame.score}
            for number, frame in enumerate(self.game.frames, start=1)]

    @property
    def score(self):
        return self.game.score() if self.game is not None else 0

    @property
    def is_over(self):
        return self.game is not None and self.game.is_over()

    @property
    def is_perfect(self):
        return self.game is not None and self.game.is_perfect()

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Error:
    """
    An instance of this class encapsulates the error code and the message to be
    returned.

    Attributes:
        error_code: HTTP error code representation
        error_message: error message that represents the error
    """
    def __init__(self, error_code, error_message):
        self.error_code = error_code
        self.error_message = error_message

    @classmethod
    def from_exception(cls, exception):
        return cls(error_code=exception.error_code,
                   error_message=str(exception))

    def __eq__(self, other):
        if not isinstance(other, Error):
            return NotImplemented
        return (self.error_code == other.error_code and
                self.error_message == other.error_message)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)
