from unittest import mock

import pytest

from django import test

from bowling import exceptions
from bowling import frames
from bowling import models as bowling_models
from bowling import services


SCORES = ['X', '7/', '7-2', '9/', 'X', 'X', 'X', '2-3', '6/']


def frame_scores(score_card):
    return [frame['score'] for frame in score_card.frames]


class ScoreFramesTest(test.SimpleTestCase):
    """Unit tests to verify scoring a game from the frame notation."""

    def test_score_frames__last_attempt_all_strikes(self):
        score_card = services.score_frames('Pete', SCORES + ['X-X-X'])
        assert score_card.errors == []
        assert score_card.player_name == 'Pete'
        assert score_card.game.frames[-1] == frames.Frame.final(10, 10, 10)
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 158, 188]
        assert score_card.score == 188
        assert score_card.is_over
        assert not score_card.is_perfect

    def test_score_frames__last_attempt_two_strikes_open_frame(self):
        score_card = services.score_frames('Pete', SCORES + ['X-X-9'])
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 158, 187]

    def test_score_frames__last_attempt_one_strike_open_frame(self):
        score_card = services.score_frames('Pete', SCORES + ['X-2-5'])
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 158, 175]

    def test_score_frames__last_attempt_spare(self):
        score_card = services.score_frames('Pete', SCORES + ['7/5'])
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 155, 170]

    def test_score_frames__last_attempt_open_frame(self):
        score_card = services.score_frames('Pete', SCORES + ['2-3'])
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 150, 155]

    def test_score_frames__last_attempt_strike_spare(self):
        score_card = services.score_frames('Pete', SCORES + ['X-7/'])
        assert frame_scores(score_card) == [
            20, 37, 46, 66, 96, 118, 133, 138, 158, 178]

    def test_score_frames__active_game(self):
        score_card = services.score_frames('Pete', SCORES[:7])
        assert score_card.errors == []
        assert score_card.score == 96
        assert not score_card.is_over

    def test_score_frames__completed_games(self):
        games = [
            (['X', 'X', '7-2', 'X', 'X', 'X', 'X', 'X', 'X', 'X-X-X'], 265),
            (['X', 'X', '7/', 'X', 'X', 'X', 'X', 'X', 'X', 'X-X-X'], 277),
            (SCORES + ['7/3'], 168),
            (SCORES + ['7/X'], 175),
            (SCORES + ['X-4-9'], 181),
            (SCORES + ['X-4/'], 178),
        ]
        for notations, expected in games:
            assert services.score_frames('Pete', notations).score == expected

    def test_score_frames__perfect_game(self):
        score_card = services.score_frames('Pete', ['X'] * 9 + ['X-X-X'])
        assert score_card.score == 300
        assert score_card.is_perfect

    def test_score_frames__new_game(self):
        score_card = services.score_frames('Pete', [])
        assert score_card.errors == []
        assert score_card.frames == []
        assert score_card.score == 0

    def test_score_frames__invalid_score_format(self):
        score_card = services.score_frames('Pete', ['XX'])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400,
                error_message='Score format: \'XX\' is invalid for frame: 1.')]

    def test_score_frames__game_has_been_played(self):
        score_card = services.score_frames(
            'Pete', SCORES + ['7/3', '7/3'])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400,
                error_message='Game:\'Pete\' has already been played.')]

    def test_score_frames__blank_player_name(self):
        score_card = services.score_frames('  ', ['X'])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400, error_message='Player name is required.')]
        assert score_card.game is None
        assert score_card.score == 0

    def test_score_frames__unexpected_error(self):
        with mock.patch('bowling.services.parse_frame',
                        side_effect=RuntimeError('test')):
            score_card = services.score_frames('Pete', ['X'])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=500,
                error_message='Unable to score the game of \'Pete\'.')]


class ScoreRollsTest(test.SimpleTestCase):

    def test_score_rolls__mixed_game(self):
        score_card = services.score_rolls(
            'Pete', [10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6, 10, 10, 10, 8, 1])
        assert score_card.errors == []
        assert frame_scores(score_card) == [
            20, 39, 48, 66, 74, 84, 90, 120, 148, 157]
        assert score_card.frames[0] == {
            'frame': 1, 'kind': 'default', 'rolls': [10, 0], 'score': 20}
        assert score_card.frames[-1] == {
            'frame': 10, 'kind': 'final', 'rolls': [10, 8, 1], 'score': 157}

    def test_score_rolls__unscored_frames(self):
        score_card = services.score_rolls('Pete', [10, 10, 4])
        assert frame_scores(score_card) == [None, None]
        assert score_card.game.pending_rolls == (4,)
        assert score_card.score == 0

    def test_score_rolls__invalid_pins(self):
        score_card = services.score_rolls('Pete', [1, 11])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400,
                error_message=('The number of pins 11 is invalid. '
                               'The number must be between 0 and 10.'))]

    def test_score_rolls__invalid_frame_total(self):
        score_card = services.score_rolls('Pete', [7, 4])
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400,
                error_message='Frame 7-4 knocks down more than 10 pins.')]


class ParseFrameTest(test.SimpleTestCase):

    def test_parse_frame__missing_notation(self):
        with pytest.raises(exceptions.InvalidFrameNotation,
                           match='for frame: 5'):
            services.parse_frame('', 5)

    def test_parse_frame__invalid_strike_last_attempt(self):
        with pytest.raises(exceptions.InvalidFrameNotation):
            services.parse_frame('X-X', 10)

    def test_parse_frame__invalid_spare_last_attempt(self):
        with pytest.raises(exceptions.InvalidFrameNotation):
            services.parse_frame('7/', 10)

    def test_parse_frame__last_attempt_notation_prior_to_last_frame(self):
        with pytest.raises(exceptions.InvalidFrameNotation):
            services.parse_frame('X-X', 4)
        with pytest.raises(exceptions.InvalidFrameNotation):
            services.parse_frame('7/3', 4)

    def test_parse_frame__too_many_pins(self):
        with pytest.raises(exceptions.InvalidFrameTotal):
            services.parse_frame('7-5', 4)

    def test_parse_frame__open_frame(self):
        assert services.parse_frame('2-3', 5) == frames.Frame.default(2, 3)

    def test_parse_frame__spare(self):
        assert services.parse_frame('7/', 5) == frames.Frame.default(7, 3)

    def test_parse_frame__strike(self):
        assert services.parse_frame('X', 4) == frames.Frame.strike()

    def test_parse_frame__last_attempt(self):
        expected = {
            'X-X-X': (10, 10, 10),
            'X-7/': (10, 7, 3),
            'X-X-9': (10, 10, 9),
            'X-2-3': (10, 2, 3),
            '7/4': (7, 3, 4),
            '7/X': (7, 3, 10),
            '2-3': (2, 3, 0),
        }
        for notation, rolls in expected.items():
            assert services.parse_frame(notation, 10) == frames.Frame.final(
                *rolls)
