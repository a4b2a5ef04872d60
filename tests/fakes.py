"""
Collaborator doubles selected through ``settings.NEWS_EVENTS`` in tests.
"""
from news_events.stores import DjangoObjectStore, OrmDocumentStore
from users.auth import LocalAuthService, SignOutError


class UnreachableDocumentStore(OrmDocumentStore):
    def get(self, doc_id):
        raise ConnectionError("document store unreachable")


class FailingUploadObjectStore(DjangoObjectStore):
    def upload(self, path, file):
        raise OSError("upload rejected")


class FailingDeleteObjectStore(DjangoObjectStore):
    def delete(self, url_or_path):
        raise OSError("blob delete failed")


class FailingSignOutAuthService(LocalAuthService):
    def sign_out(self, request):
        super().sign_out(request)
        raise SignOutError("revocation failed")


class FailingInsertDocumentStore(OrmDocumentStore):
    def insert(self, data):
        raise ConnectionError("document write rejected")
