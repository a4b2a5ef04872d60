from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from .auth import AccountCreationError, build_auth_service


class SignUpSerializer(serializers.Serializer):
    email = serializers.CharField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class SignUpAPIView(APIView):
    """Create an account in the configured auth service."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=SignUpSerializer, responses={201: SignUpSerializer})
    def post(self, request):
        serializer = SignUpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]
        try:
            build_auth_service().create_account(email, serializer.validated_data["password"])
        except AccountCreationError as exc:
            return Response({"detail": exc.message}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"email": email}, status=status.HTTP_201_CREATED)
