from django import forms


class SignUpForm(forms.Form):
    """Email + password; the auth service decides what it accepts."""

    email = forms.CharField(
        max_length=254,
        widget=forms.EmailInput(attrs={"placeholder": "Email", "class": "input"}),
    )
    password = forms.CharField(
        strip=False,
        widget=forms.PasswordInput(attrs={"placeholder": "Password", "class": "input"}, render_value=True),
    )
