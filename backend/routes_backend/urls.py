from django.urls import path

from backend.routes.views import RoutesView
from routing import RouteAggregator, osrm_client_from_env, routing_policy_from_env

# One client (and its connection pool) for the whole process, configured once.
route_aggregator = RouteAggregator(osrm_client_from_env(routing_policy_from_env()))

urlpatterns = [
    path('routes', RoutesView.as_view(aggregator=route_aggregator), name='routes'),
]
