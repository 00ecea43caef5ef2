"""Module that encapsulates all service functions.
"""
import logging
import re

from bowling import exceptions
from bowling import frames as bowling_frames
from bowling import models as bowling_models
from bowling import validators


STRIKE = 'X'
SPARE = '/'
SEPARATOR = '-'

DEFAULT_FRAME_PATTERN = re.compile(r'^(X|[0-9]/|[0-9]-[0-9])$')
FINAL_FRAME_PATTERN = re.compile(
    r'^(X-X-X|X-X-[0-9]|X-[0-9]/|X-[0-9]-[0-9]|[0-9]/X|[0-9]/[0-9]|'
    r'[0-9]-[0-9])$')


def score_rolls(player_name, rolls):
    """Scores the game of a player from the pins knocked down by each roll.

    Returns:
        a score card of the game; the card carries the error instead if a roll
        could not be recorded
    """
    return _score_game(player_name, rolls, lambda game, pins: game.roll(pins))


def score_frames(player_name, notations):
    """Scores the game of a player from the score sheet notation of frames.

    The acceptable formats are listed by `parse_frame`.
    """
    def add_frame(game, notation):
        if game.is_over():
            raise exceptions.GameOver(game.player_name)
        game.add_frame(parse_frame(notation, len(game.frames) + 1))

    return _score_game(player_name, notations, add_frame)


def _score_game(player_name, entries, record):
    score_card = bowling_models.ScoreCard(player_name=player_name)
    try:
        score_card.game = bowling_models.Game(player_name)
        for entry in entries:
            record(score_card.game, entry)
        return score_card
    except exceptions.ScoringException as e:
        logging.error('Unable to score the game of %s: %s', player_name, e)
        score_card.add_error(bowling_models.Error.from_exception(e))
        return score_card
    except Exception:
        logging.exception(
            'Unable to score the game of {}.'.format(player_name))
        score_card.add_error(bowling_models.Error(
            error_code=500,
            error_message='Unable to score the game of \'{}\'.'.format(
                player_name)))
        return score_card


def parse_frame(notation, frame_number):
    """Parses the score sheet notation of a frame and returns the frame.

    The acceptable formats for frames 1 to 9 are given below:

    1. X (strike)

    2. <0-9>/ (spare)

    3. <0-9>-<0-9> (open frame)

    The final frame additionally accepts:

    1. X-X-X (three strikes)

    2. X-X-<0-9> (two strikes and an open bonus roll)

    3. X-<0-9>/ (strike and a spare)

    4. X-<0-9>-<0-9> (strike and two open bonus rolls)

    5. <0-9>/X (spare and a strike)

    6. <0-9>/<0-9> (spare and an open bonus roll)

    Args:
        notation: string; representation of the frame
        frame_number: integer; number of the frame, starting at 1

    Returns:
        the frame instance
    """
    is_final = frame_number == validators.MAX_FRAMES
    pattern = FINAL_FRAME_PATTERN if is_final else DEFAULT_FRAME_PATTERN
    if not notation or not pattern.match(notation):
        raise exceptions.InvalidFrameNotation(notation, frame_number)

    rolls = _parse_rolls(notation)
    if not is_final:
        if len(rolls) == 1:
            return bowling_frames.Frame.strike()
        return bowling_frames.Frame.default(*rolls)
    return bowling_frames.Frame.final(*rolls)


def _parse_rolls(notation):
    """Returns the pins knocked down by each roll of the notation.

    For example, 'X-7/' is parsed as [10, 7, 3].
    """
    rolls = []
    for symbol in notation:
        if symbol == SEPARATOR:
            continue
        if symbol == STRIKE:
            rolls.append(validators.MAX_PINS)
        elif symbol == SPARE:
            rolls.append(validators.MAX_PINS - rolls[-1])
        else:
            rolls.append(int(symbol))
    return rolls
