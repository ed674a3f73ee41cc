from django.urls import path
from .views import (
    UserListView,
    UserBulkCreateView,
    UserLoginView,
    UserByEmailView,
    UserDetailView,
)

urlpatterns = [
    path("", UserListView.as_view(), name="users-list"),
    path("bulk/", UserBulkCreateView.as_view(), name="users-bulk"),
    path("login/", UserLoginView.as_view(), name="users-login"),
    path("by-email/<str:email>/", UserByEmailView.as_view(), name="users-by-email"),
    path("<int:user_id>/", UserDetailView.as_view(), name="users-detail"),
]
