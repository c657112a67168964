import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from routing.models import AggregateOutcome, RouteQuery
from routing.ranking import sort_outcome
from .serializers import RouteQuerySerializer, RoutesResponseSerializer, first_error_message

logger = logging.getLogger(__name__)


class RoutesView(APIView):
    """
    GET /routes?src=<lat,lng>&dst=<lat,lng>&dst=...

    Returns the routes from src to every reachable dst, fastest first.
    Destinations OSRM could not route are silently left out, so an empty
    routes list is a valid 200.
    """
    # injected through as_view(aggregator=...)
    aggregator = None

    def get(self, request):
        serializer = RouteQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            message = first_error_message(serializer.errors)
            logger.info("Rejected /routes query: %s", message)
            return Response(
                {"code": status.HTTP_400_BAD_REQUEST, "message": message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        query = RouteQuery.new(serializer.validated_data["src"], serializer.validated_data["dst"])

        outcome = AggregateOutcome(
            source=query.source,
            results=self.aggregator.aggregate(query.source, query.destinations),
        )
        sort_outcome(outcome)

        return Response(RoutesResponseSerializer(outcome).data)
