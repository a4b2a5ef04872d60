"""
JSON API for news & events.

``NewsEventViewSet`` exposes the same list/create/overwrite/delete
workflows as the admin pages through the shared service layer.  ``PUT``
is a full overwrite: omitted optional fields are written back empty.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.exceptions import APIException, NotFound
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exceptions import DeletionError, DocumentNotFound, SubmissionError
from .serializers import DeleteResultSerializer, NewsEventSerializer, NewsEventWriteSerializer
from .services import build_news_event_service


class BackendUnavailable(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Storage backend request failed."
    default_code = "backend_unavailable"


class NewsEventViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    serializer_class = NewsEventSerializer

    def get_service(self):
        return build_news_event_service()

    @extend_schema(responses=NewsEventSerializer(many=True))
    def list(self, request):
        records = self.get_service().list_records()
        return Response(NewsEventSerializer(records, many=True).data)

    @extend_schema(responses=NewsEventSerializer)
    def retrieve(self, request, pk=None):
        document = self.get_service().load(pk)
        if document is None:
            raise NotFound(f"No document found with docId {pk}")
        return Response(NewsEventSerializer(document).data)

    @extend_schema(request=NewsEventWriteSerializer, responses={201: NewsEventSerializer})
    def create(self, request):
        return self._save(request, doc_id=None, success_status=status.HTTP_201_CREATED)

    @extend_schema(request=NewsEventWriteSerializer, responses=NewsEventSerializer)
    def update(self, request, pk=None):
        return self._save(request, doc_id=pk, success_status=status.HTTP_200_OK)

    @extend_schema(responses=DeleteResultSerializer)
    def destroy(self, request, pk=None):
        try:
            result = self.get_service().delete(pk)
        except DeletionError as exc:
            raise BackendUnavailable(exc.message)
        return Response(DeleteResultSerializer(result).data)

    def _save(self, request, *, doc_id, success_status):
        serializer = NewsEventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = self.get_service()
        try:
            result = service.submit(
                serializer.to_fields(),
                image=serializer.validated_data.get("image"),
                pdf=serializer.validated_data.get("pdf"),
                doc_id=doc_id,
            )
        except SubmissionError as exc:
            if isinstance(exc.__cause__, DocumentNotFound):
                raise NotFound(str(exc.__cause__))
            raise BackendUnavailable(exc.message)

        document = service.load(result.doc_id) or {**result.record, "docId": result.doc_id}
        return Response(NewsEventSerializer(document).data, status=success_status)
