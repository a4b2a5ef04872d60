"""
Serializers for the news & events API.

Records are exposed in their document shape (``docId``, ``id``, ``title``,
``description``, ``imageUrl``, ``pdfUrl``, ``createdAt``, ``updatedAt``).
Writes accept the same editable fields plus optional ``image`` and ``pdf``
uploads, and always carry the full record.
"""
from rest_framework import serializers

from .services import RECORD_FIELDS


class NewsEventSerializer(serializers.Serializer):
    docId = serializers.CharField(read_only=True)
    id = serializers.CharField(max_length=255)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    imageUrl = serializers.CharField(required=False, allow_blank=True, default="", max_length=1024)
    pdfUrl = serializers.CharField(required=False, allow_blank=True, default="", max_length=1024)
    createdAt = serializers.DateTimeField(read_only=True)
    updatedAt = serializers.DateTimeField(read_only=True)


class NewsEventWriteSerializer(NewsEventSerializer):
    image = serializers.FileField(required=False, write_only=True)
    pdf = serializers.FileField(required=False, write_only=True)

    def to_fields(self) -> dict:
        data = self.validated_data
        return {name: data.get(name, "") for name in RECORD_FIELDS}


class DeleteResultSerializer(serializers.Serializer):
    docId = serializers.CharField(source="doc_id")
    warnings = serializers.ListField(child=serializers.CharField())
