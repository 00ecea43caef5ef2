from rest_framework.urlpatterns import format_suffix_patterns
from django.urls import re_path
from bowling import viewset

urlpatterns = format_suffix_patterns([
    re_path(r'^game/rolls$',
            viewset.ScoreViewSet.as_view({'post': 'score_rolls'}),
            name='score-rolls'),
    re_path(r'^game/frames$',
            viewset.ScoreViewSet.as_view({'post': 'score_frames'}),
            name='score-frames'),
])
