"""Encapsulates all instances of serialisers."""
from rest_framework import serializers

from bowling import validators

import collections


class BaseSerializer(serializers.Serializer):

    def to_representation(self, instance):
        """Return just errors if applicable, and exclude errors otherwise."""
        ret = super().to_representation(instance)
        # If error exists, then all fields should be removed.
        if 'errors' in ret and ret.get('errors'):
            return collections.OrderedDict(errors=ret['errors'])

        return collections.OrderedDict((k, v) for k, v in ret.items()
                                       if k != 'errors')


class ErrorSerializer(serializers.Serializer):
    """Representation of any errors."""
    error_code = serializers.IntegerField()
    error_message = serializers.CharField(max_length=200)


class FrameSerializer(serializers.Serializer):
    """Representation of a single frame and its cumulative score."""
    frame = serializers.IntegerField(
        min_value=1, max_value=validators.MAX_FRAMES)
    kind = serializers.CharField()
    rolls = serializers.ListField(child=serializers.IntegerField())
    score = serializers.IntegerField(allow_null=True)


class ScoreCardSerializer(BaseSerializer):
    """Serializer representation of a scored game."""
    player_name = serializers.CharField(read_only=True)
    frames = FrameSerializer(many=True, read_only=True)
    score = serializers.IntegerField(read_only=True)
    is_over = serializers.BooleanField(read_only=True)
    is_perfect = serializers.BooleanField(read_only=True)
    errors = ErrorSerializer(required=False, many=True, read_only=True)


class RollsRequestSerializer(serializers.Serializer):
    """Validates the request to score a game roll by roll.

    The range of the pins is checked while the game is scored so that the
    error is reported by the game itself.
    """
    player_name = serializers.CharField(max_length=100)
    rolls = serializers.ListField(
        child=serializers.IntegerField(), allow_empty=True)


class FramesRequestSerializer(serializers.Serializer):
    """Validates the request to score a game frame by frame."""
    player_name = serializers.CharField(max_length=100)
    frames = serializers.ListField(
        child=serializers.CharField(max_length=5), allow_empty=True)
