"""
Forms for the news & events editor.

Only ``id`` and ``title`` are required.  The current image and PDF URLs
travel as hidden fields so an edit without new files keeps them.
"""
from django import forms

INPUT_CLASS = "input"


class NewsEventForm(forms.Form):
    id = forms.CharField(
        label="ID",
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "Unique ID", "class": INPUT_CLASS}),
    )
    title = forms.CharField(
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "Title", "class": INPUT_CLASS}),
    )
    description = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"placeholder": "Description", "rows": 4, "class": INPUT_CLASS}),
    )
    image = forms.FileField(
        label="Image Upload",
        required=False,
        widget=forms.FileInput(attrs={"accept": "image/*"}),
    )
    pdf = forms.FileField(
        label="PDF Upload",
        required=False,
        widget=forms.FileInput(attrs={"accept": ".pdf"}),
    )
    image_url = forms.CharField(required=False, widget=forms.HiddenInput)
    pdf_url = forms.CharField(required=False, widget=forms.HiddenInput)

    @staticmethod
    def initial_from_document(document: dict) -> dict:
        return {
            "id": document.get("id", ""),
            "title": document.get("title", ""),
            "description": document.get("description", ""),
            "image_url": document.get("imageUrl", ""),
            "pdf_url": document.get("pdfUrl", ""),
        }

    def to_fields(self) -> dict:
        data = self.cleaned_data
        return {
            "id": data["id"],
            "title": data["title"],
            "description": data.get("description", ""),
            "imageUrl": data.get("image_url", ""),
            "pdfUrl": data.get("pdf_url", ""),
        }
