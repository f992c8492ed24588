"""
Voting views - Tally, cast vote, reset, voting page
"""
from django.shortcuts import redirect, render
from django.views import View
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from .serializers import CastVoteSerializer, TallySerializer, VoteResponseSerializer
from .services import cast_vote, reset_votes
from .sessions import read_tally
from .strategies import MAX_WEIGHT, MIN_WEIGHT, StrategyKind

logger = logging.getLogger(__name__)


class TallyView(APIView):
    """
    Current tally for the caller's session.

    Examples:
        GET /api/voting/tally/  → counts, per-candidate percentages, total
    """

    def get(self, request):
        try:
            store = read_tally(request.session)
            return Response(TallySerializer(store).data)

        except Exception as e:
            logger.error(f"Error retrieving tally: {e}", exc_info=True)
            return Response({
                'error': 'Failed to retrieve tally',
                'detail': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class CastVoteView(APIView):
    """
    Cast a vote for a candidate.

    Request body:
    - candidate: str
    - strategy: 'simple' | 'weighted' (default 'simple')
    - weight: int (default 1, clamped to 1-5, weighted only)

    Returns:
    - success, counted, candidate, strategy, increment
    - tally: the updated counts and percentages
    """

    def post(self, request):
        """
        Cast a vote. An unknown candidate is not an error: the tally is left
        untouched and `counted` is false.
        """
        try:
            serializer = CastVoteSerializer(data=request.data)

            if not serializer.is_valid():
                return Response({
                    'error': 'Invalid vote data',
                    'detail': serializer.errors
                }, status=status.HTTP_400_BAD_REQUEST)

            outcome = cast_vote(
                request.session,
                serializer.validated_data['candidate'],
                kind=serializer.validated_data['strategy'],
                weight=serializer.validated_data['weight'],
            )

            return Response(VoteResponseSerializer(outcome).data)

        except Exception as e:
            logger.error(f"Error casting vote: {e}", exc_info=True)
            return Response({
                'error': 'Failed to cast vote',
                'detail': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ResetView(APIView):
    """
    Reset the caller's tally to zero for every candidate.
    """

    def post(self, request):
        try:
            store = reset_votes(request.session)
            return Response(TallySerializer(store).data)

        except Exception as e:
            logger.error(f"Error resetting tally: {e}", exc_info=True)
            return Response({
                'error': 'Failed to reset tally',
                'detail': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class VotingPageView(View):
    """
    Server-rendered voting page.

    GET shows the ballot and the results. POST handles the two form buttons:
    `vote` (with candidate, strategy, weight) and `reset`.
    """
    template_name = 'voting/index.html'

    def get(self, request):
        return self._render(request, read_tally(request.session))

    def post(self, request):
        if 'reset' in request.POST:
            reset_votes(request.session)
            return redirect('voting_page')

        if 'vote' in request.POST:
            serializer = CastVoteSerializer(data=request.POST)

            if not serializer.is_valid():
                logger.info(f"Rejected vote form: {serializer.errors}")
                return self._render(
                    request,
                    read_tally(request.session),
                    errors=serializer.errors,
                    status=400
                )

            cast_vote(
                request.session,
                serializer.validated_data['candidate'],
                kind=serializer.validated_data['strategy'],
                weight=serializer.validated_data['weight'],
            )

        return redirect('voting_page')

    def _render(self, request, store, errors=None, status=200):
        context = {
            'candidates': store.candidates,
            'results': store.results(),
            'total_votes': store.total,
            'strategies': StrategyKind.choices(),
            'min_weight': MIN_WEIGHT,
            'max_weight': MAX_WEIGHT,
            'errors': errors or {},
        }
        return render(request, self.template_name, context, status=status)
