from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.exceptions import ValidationError as DRFValidationError
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_user_service
from .serializers import (
    CreateUserSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    UpdateResultSerializer,
    UpdateUserSerializer,
    UserSerializer,
)

logger = get_logger(__name__).bind(component="users", layer="view")


def _validate(serializer, log, action: str):
    """Run serializer validation; return an error response or None."""
    try:
        serializer.is_valid(raise_exception=True)
    except DRFValidationError as exc:
        log.warning(f"{action} validation failed", errors=exc.detail)
        return error_response("VALIDATION_ERROR", "Invalid input", exc.detail)
    return None


@extend_schema(tags=["Users"])
class UserListView(APIView):
    service = build_user_service()
    log = logger.bind(view="UserListView")

    def get_permissions(self):
        # Registration is open; listing requires a token.
        if self.request.method == "POST":
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        summary="List users",
        responses={
            200: UserSerializer(many=True),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug("Listing users via API")
        users = self.service.find_all()
        return Response(UserSerializer(users, many=True).data)

    @extend_schema(
        summary="Create user",
        request=CreateUserSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CreateUserSerializer(data=request.data)
        invalid = _validate(serializer, self.log, "User create")
        if invalid is not None:
            return invalid
        user = self.service.create_user(serializer.validated_data)
        self.log.info("User created via API", user_id=user.id)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Users"])
class UserBulkCreateView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="UserBulkCreateView")

    @extend_schema(
        summary="Create many users in one transaction",
        description=(
            "Either every user in the list is created or none is. A duplicate "
            "email anywhere in the batch rolls the whole batch back and returns 409."
        ),
        request=CreateUserSerializer(many=True),
        responses={
            201: UserSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CreateUserSerializer(
            data=request.data, many=True, allow_empty=False
        )
        invalid = _validate(serializer, self.log, "Bulk create")
        if invalid is not None:
            return invalid
        users = self.service.create_many_users(serializer.validated_data)
        self.log.info("Bulk create completed via API", count=len(users))
        return Response(
            UserSerializer(users, many=True).data, status=status.HTTP_201_CREATED
        )


@extend_schema(tags=["Users", "Auth"])
class UserLoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_user_service()
    log = logger.bind(view="UserLoginView")

    @extend_schema(
        summary="Login (issue access token)",
        request=LoginRequestSerializer,
        responses={
            200: LoginResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        invalid = _validate(serializer, self.log, "Login")
        if invalid is not None:
            return invalid
        user = self.service.authenticate(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        result = self.service.login(user)
        return Response(LoginResponseSerializer(result).data)


@extend_schema(tags=["Users"])
class UserByEmailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="UserByEmailView")

    @extend_schema(
        summary="Get user by email",
        parameters=[OpenApiParameter("email", str, OpenApiParameter.PATH)],
        responses={
            200: UserSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, email: str):
        self.log.debug("Fetching user by email", email=email)
        user = self.service.find_user_by_email(email)
        return Response(UserSerializer(user).data)


@extend_schema(tags=["Users"])
class UserDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="UserDetailView")

    @extend_schema(
        summary="Get user by ID",
        parameters=[OpenApiParameter("user_id", int, OpenApiParameter.PATH)],
        responses={
            200: UserSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, user_id: int):
        self.log.debug("Fetching user detail", user_id=user_id)
        user = self.service.find_user_by_id(user_id)
        return Response(UserSerializer(user).data)

    @extend_schema(
        summary="Update user",
        description="Partial update. Returns the number of affected rows; 0 when the id is unknown.",
        request=UpdateUserSerializer,
        responses={
            200: UpdateResultSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, user_id: int):
        serializer = UpdateUserSerializer(data=request.data, partial=True)
        invalid = _validate(serializer, self.log, "User update")
        if invalid is not None:
            return invalid
        self.log.info("Patching user", user_id=user_id)
        result = self.service.update_user_by_id(user_id, serializer.validated_data)
        return Response(UpdateResultSerializer(result).data)

    @extend_schema(
        summary="Delete user",
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, user_id: int):
        self.log.info("Deleting user via API", user_id=user_id)
        self.service.remove_user_by_id(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
