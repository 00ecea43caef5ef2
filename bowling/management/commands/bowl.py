"""Command-line score calculator for a single player's game."""
import logging
import sys

from django.core.management.base import BaseCommand
from django.core.management.base import CommandError

from bowling import exceptions
from bowling import frames as bowling_frames
from bowling import models as bowling_models
from bowling import validators


USER_TERMINATE = 'quit'


class Command(BaseCommand):
    help = ('Scores a ten-pin bowling game from the pins knocked down by '
            'each roll.')
    stealth_options = ('stdin',)

    def add_arguments(self, parser):
        parser.add_argument(
            '--player', help='Name of the player; prompted for if missing.')
        parser.add_argument(
            '--rolls', nargs='+', type=int, metavar='PINS',
            help='Pins knocked down by each roll, instead of prompting.')

    def handle(self, *args, **options):
        self.stdin = options.get('stdin') or sys.stdin
        logging.info('*** Ten-pin bowling score calculator ***')
        player_name = options.get('player')
        if player_name is None:
            player_name = self._read_line(
                'Enter player name or {} to terminate: '.format(
                    USER_TERMINATE))
        if player_name.strip().lower() == USER_TERMINATE:
            self.stdout.write('Ten-pin bowling game terminated.')
            return
        try:
            game = bowling_models.Game(player_name)
            if options.get('rolls') is not None:
                self._play_rolls(game, options['rolls'])
            else:
                self._play_frames(game)
        except exceptions.ScoringException as e:
            logging.error('Unable to score the game of %s: %s', player_name, e)
            raise CommandError(str(e))
        self._report(game)

    def _play_rolls(self, game, rolls):
        for pins in rolls:
            self._report_frames(game, game.roll(pins))

    def _play_frames(self, game):
        for frame_number in range(1, validators.MAX_FRAMES):
            frame = self._capture_default_frame(frame_number)
            self._report_frames(game, game.add_frame(frame))
        self._report_frames(game, game.add_frame(self._capture_final_frame()))

    def _capture_default_frame(self, frame_number):
        first_roll = self._capture_roll('FIRST', frame_number)
        if first_roll == validators.MAX_PINS:
            return bowling_frames.Frame.strike()
        second_roll = self._capture_roll('SECOND', frame_number)
        return bowling_frames.Frame.default(first_roll, second_roll)

    def _capture_final_frame(self):
        first_roll = self._capture_roll('FIRST', validators.MAX_FRAMES)
        second_roll = self._capture_roll('SECOND', validators.MAX_FRAMES)
        if bowling_frames.Frame.has_earned_bonus_roll(first_roll, second_roll):
            bonus_roll = self._capture_roll('BONUS', validators.MAX_FRAMES)
            return bowling_frames.Frame.final(
                first_roll, second_roll, bonus_roll)
        return bowling_frames.Frame.final(first_roll, second_roll)

    def _capture_roll(self, attempt, frame_number):
        value = self._read_line(
            'Enter pins knocked down for {} attempt of frame #{}: '.format(
                attempt, frame_number))
        try:
            pins = int(value)
        except ValueError:
            raise CommandError(
                'The number of pins {!r} is not a number.'.format(value))
        validators.validate_pins(pins)
        return pins

    def _read_line(self, prompt):
        self.stdout.write(prompt, ending='')
        line = self.stdin.readline()
        if not line:
            raise CommandError('Unexpected end of input.')
        return line.strip()

    def _report_frames(self, game, updated_frames):
        numbers = {id(frame): number
                   for number, frame in enumerate(game.frames, start=1)}
        for frame in updated_frames:
            self.stdout.write('Scored frame #{} for {}: {} -> {}'.format(
                numbers[id(frame)], game.player_name,
                '-'.join(str(pins) for pins in frame.rolls), frame.score))

    def _report(self, game):
        frames = game.frames
        if frames and frames[-1].is_turkey:
            self.stdout.write('Nice, a TURKEY on the final frame!!!')
        self.stdout.write("{}'s total score: {}".format(
            game.player_name, game.score()))
        if not game.is_over():
            self.stdout.write('The game is not over after {} frames.'.format(
                len(frames)))
            return
        if game.is_perfect():
            self.stdout.write(self.style.SUCCESS(
                'Congratulations, you have bowled a PERFECT game!!!'))
        logging.info('Ten-pin bowling game of %s complete with %s points',
                     game.player_name, game.score())
