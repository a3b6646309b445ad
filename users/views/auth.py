import logging

from django.conf import settings
from django.contrib.auth import authenticate
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

logger = logging.getLogger(__name__)

# ---------------------------
# SERIALIZERS (LOCAL, SIMPLE)
# ---------------------------


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class AdminLoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    refresh = serializers.CharField()
    vat = serializers.IntegerField()


class AdminLoginThrottle(AnonRateThrottle):
    scope = "public_write"


# ---------------------------
# VIEWS
# ---------------------------


class AdminLoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [AdminLoginThrottle]
    serializer_class = AdminLoginSerializer

    @extend_schema(
        tags=["Admin"],
        request=AdminLoginSerializer,
        responses={
            200: AdminLoginResponseSerializer,
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Exchange admin credentials for a bearer token (+ configured VAT %).",
    )
    def post(self, request):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        username = serializer.validated_data["username"]
        password = serializer.validated_data["password"]

        user = authenticate(request=request, username=username, password=password)

        if not user or not user.is_staff:
            logger.warning("Admin login rejected", extra={"username": username})
            return Response(
                {"detail": "Unauthorized"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        refresh = RefreshToken.for_user(user)
        logger.info("Admin login", extra={"user_id": user.pk})

        return Response(
            {
                "token": str(refresh.access_token),
                "refresh": str(refresh),
                "vat": settings.STORE_VAT_PERCENT,
            }
        )


class AdminTokenRefreshView(TokenRefreshView):
    """
    POST /api/admin/token/refresh/  {"refresh": "<token>"}
    """

    authentication_classes = []
    throttle_classes = [AdminLoginThrottle]
