"""
Voting app URLs - Tally, vote, reset
"""
from django.urls import path
from .views import TallyView, CastVoteView, ResetView

app_name = 'voting'

urlpatterns = [
    # Counts and percentages for the caller's session
    path('voting/tally/', TallyView.as_view(), name='tally'),

    # Cast vote (simple or weighted)
    path('voting/vote/', CastVoteView.as_view(), name='cast_vote'),

    # Back to zero for every candidate
    path('voting/reset/', ResetView.as_view(), name='reset'),
]
