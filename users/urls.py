"""
Account endpoints for the users app.

Included under the ``/accounts/`` prefix.
"""
from django.urls import path

from .views import SignOutView, SignUpView

app_name = "users"

urlpatterns = [
    path("sign-up/", SignUpView.as_view(), name="sign-up"),
    path("sign-out/", SignOutView.as_view(), name="sign-out"),
]
