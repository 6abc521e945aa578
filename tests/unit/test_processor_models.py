import pytest

from app.processor.models import DocumentIdentity, InvalidObjectKeyError, derive_identity


class TestDeriveIdentity:
    def test_owner_and_document_from_key(self) -> None:
        assert derive_identity("user42/doc7.png") == DocumentIdentity(
            owner_id="user42", document_id="doc7"
        )

    @pytest.mark.parametrize(
        ("key", "owner", "name"),
        [
            ("alice/letter.jpg", "alice", "letter"),
            ("bob/2024-05-01 scan.jpeg", "bob", "2024-05-01 scan"),
            ("u1/nested/path/page.tiff", "u1", "page"),
        ],
    )
    def test_owner_is_first_segment_and_document_is_file_stem(
        self, key: str, owner: str, name: str
    ) -> None:
        identity = derive_identity(key)
        assert identity.owner_id == owner
        assert identity.document_id == name

    def test_document_stops_at_first_dot(self) -> None:
        assert derive_identity("u1/scan.v2.png").document_id == "scan"

    def test_key_without_extension(self) -> None:
        assert derive_identity("u1/scan").document_id == "scan"

    def test_empty_owner_raises(self) -> None:
        with pytest.raises(InvalidObjectKeyError):
            derive_identity("/doc.png")

    def test_empty_document_raises(self) -> None:
        with pytest.raises(InvalidObjectKeyError):
            derive_identity("user42/")

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            derive_identity("user42/.png")
