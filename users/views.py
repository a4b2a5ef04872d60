"""
Account pages: sign-up (account provisioning) and sign-out.

Sign-in itself is handled by the hosted login page at ``settings.LOGIN_URL``.
"""
import logging

from django.conf import settings
from django.shortcuts import redirect, render
from django.views import View

from .auth import AccountCreationError, SignOutError, build_auth_service
from .forms import SignUpForm

logger = logging.getLogger(__name__)


class SignUpView(View):
    template_name = "users/sign_up.html"

    def get(self, request):
        return render(request, self.template_name, {"form": SignUpForm()})

    def post(self, request):
        form = SignUpForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})
        try:
            build_auth_service().create_account(form.cleaned_data["email"], form.cleaned_data["password"])
        except AccountCreationError as exc:
            return render(request, self.template_name, {"form": form, "error": exc.message})
        return redirect(settings.LOGIN_URL)


class SignOutView(View):
    http_method_names = ["post"]

    def post(self, request):
        try:
            build_auth_service().sign_out(request)
        except SignOutError as exc:
            logger.error("Error signing out: %s", exc)
        return redirect("index")
