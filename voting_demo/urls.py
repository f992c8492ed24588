"""
URL configuration for voting_demo project.
"""
from django.urls import path, include
from django.http import JsonResponse

from voting import __version__
from voting.views import VotingPageView


def health_check(request):
    """Simple health check endpoint"""
    return JsonResponse({
        'status': 'ok',
        'service': 'voting-demo',
        'version': __version__
    })


urlpatterns = [
    # Voting page
    path('', VotingPageView.as_view(), name='voting_page'),

    # Health check
    path('health/', health_check, name='health_check'),

    # API endpoints
    path('api/', include('voting.urls')),
]
