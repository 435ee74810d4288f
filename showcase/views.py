import logging

from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from . import repository as content
from .serializers import ProjectSerializer, ResumeEntrySerializer

logger = logging.getLogger(__name__)


def request_fields(request):
    # Writes are not validated; anything other than a JSON object counts as no fields.
    data = request.data
    return data if hasattr(data, 'get') else {}


class ContentListView(APIView):
    """GET lists every row, POST inserts one and answers with its id."""
    repository = None
    serializer_class = None

    def get(self, request):
        rows = self.repository.list_all()
        return Response(self.serializer_class(rows, many=True).data)

    def post(self, request):
        new_id = self.repository.insert(request_fields(request))
        return Response({"id": new_id}, status=status.HTTP_200_OK)


class ContentDetailView(APIView):
    repository = None

    def delete(self, request, pk):
        self.repository.delete_by_id(pk)
        return Response({"success": True}, status=status.HTTP_200_OK)


class ProjectList(ContentListView):
    repository = content.projects
    serializer_class = ProjectSerializer

class ProjectDetail(ContentDetailView):
    repository = content.projects

class ResumeList(ContentListView):
    repository = content.resume_entries
    serializer_class = ResumeEntrySerializer

class ResumeDetail(ContentDetailView):
    repository = content.resume_entries


class AdminLoginView(APIView):
    """
    Checks the admin password against the configured constant.

    The returned token is a placeholder: nothing stores, expires or verifies
    it, and the write routes stay open to every caller.
    """

    def post(self, request):
        password = request_fields(request).get('password')
        if password == settings.ADMIN_PASSWORD:
            return Response({"token": settings.ADMIN_TOKEN}, status=status.HTTP_200_OK)

        logger.warning("Rejected admin login attempt")
        return Response({"error": "Unauthorized"}, status=status.HTTP_401_UNAUTHORIZED)
