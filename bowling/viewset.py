"""
Encapsulates all the view sets required to score the bowling game.
"""

from bowling import models
from bowling import serializers
from bowling import services as bowling_services

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework import viewsets


def serialized_object(serializer_class, obj, http_status):
    serialized_instance = serializer_class(obj)
    return Response(serialized_instance.data, status=http_status)


def _request_errors(detail, field=None):
    """Flattens the validation errors of a request serializer."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            yield from _request_errors(
                value, key if field is None else '{}[{}]'.format(field, key))
    elif isinstance(detail, list):
        for value in detail:
            yield from _request_errors(value, field)
    else:
        yield models.Error(error_code=400,
                           error_message='{}: {}'.format(field, detail))


class ScoreViewSet(viewsets.ViewSet):
    serializer_class = serializers.ScoreCardSerializer

    def _score(self, request, request_serializer_class, score_function, key):
        request_serializer = request_serializer_class(data=request.data)
        if not request_serializer.is_valid():
            score_card = models.ScoreCard()
            for error in _request_errors(request_serializer.errors):
                score_card.add_error(error)
        else:
            data = request_serializer.validated_data
            score_card = score_function(data['player_name'], data[key])
        http_status = (status.HTTP_400_BAD_REQUEST if score_card.errors
                       else status.HTTP_200_OK)
        return serialized_object(self.serializer_class, score_card,
                                 http_status)

    @action(detail=False, methods=['post'])
    def score_rolls(self, request):
        """Scores the game from the pins knocked down by each roll."""
        return self._score(request, serializers.RollsRequestSerializer,
                           bowling_services.score_rolls, 'rolls')

    @action(detail=False, methods=['post'])
    def score_frames(self, request):
        """Scores the game from the score sheet notation of each frame."""
        return self._score(request, serializers.FramesRequestSerializer,
                           bowling_services.score_frames, 'frames')
