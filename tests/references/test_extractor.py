"""Tests for reference extraction."""

import pytest

from chatbatch.references import ReferenceExtractor, extract_references
from chatbatch.references.descriptors import FILE, IMAGE
from chatbatch.references.extractor import get_extension, sanitize


def sanitized(prompt):
    return [ref.sanitized for ref in extract_references(prompt)]


class TestSanitize:
    """Tests for punctuation stripping."""

    def test_strips_wrapping_punctuation(self):
        """Test brackets and trailing dots are removed."""
        assert sanitize("(/tmp/photo.jpg).") == "/tmp/photo.jpg"

    def test_keeps_interior_characters(self):
        """Test only the ends are touched."""
        assert sanitize("'https://x.test/a(1).png'") == "https://x.test/a(1).png"
        assert sanitize('"[C:\\a, b\\c.gif]"') == "C:\\a, b\\c.gif"

    def test_only_punctuation(self):
        """Test a candidate made of punctuation sanitizes to empty."""
        assert sanitize("(.)") == ""


class TestGetExtension:
    """Tests for extension detection."""

    def test_local_path(self):
        assert get_extension("/img/a.PNG") == ".png"

    def test_url_ignores_query(self):
        """Test only the URL path counts."""
        assert get_extension("https://x.test/c.pdf?dl=1") == ".pdf"
        assert get_extension("https://x.test/download?file=a.png") == ""

    def test_unparseable_url_falls_back_to_suffix(self):
        """Test naive suffix is used when the URL can't be parsed."""
        assert get_extension("http://[::1/a.png") == ".png"

    def test_no_extension(self):
        assert get_extension("/tmp/README") == ""


class TestReferenceExtractor:
    """Tests for ReferenceExtractor."""

    def test_sanitized_reference_from_prompt(self):
        """Test wrapping punctuation around a path is dropped."""
        refs = extract_references("See (/tmp/photo.jpg).")

        assert len(refs) == 1
        assert refs[0].sanitized == "/tmp/photo.jpg"
        assert refs[0].extension == ".jpg"
        assert refs[0].descriptor.kind == IMAGE
        assert refs[0].is_remote is False

    def test_url_keeps_original_match(self):
        """Test the raw match is retained next to the sanitized value."""
        refs = extract_references("Look at (https://x.test/pic.png).")

        assert refs[0].original == "https://x.test/pic.png)."
        assert refs[0].sanitized == "https://x.test/pic.png"
        assert refs[0].is_remote is True

    def test_mixed_prompt(self):
        """Test supported references survive, unsupported and duplicates don't."""
        prompt = (
            "Compare /img/a.png, ./b.jpg and https://x.test/c.pdf?dl=1 with notes.txt, "
            "/img/A.PNG and C:\\Users\\me\\My Pics\\d.webp."
        )

        assert sanitized(prompt) == [
            "/img/a.png",
            "./b.jpg",
            "https://x.test/c.pdf?dl=1",
            "C:\\Users\\me\\My Pics\\d.webp",
        ]

    def test_case_insensitive_dedup_first_wins(self):
        """Test /img/a.PNG and /img/a.png collapse to the first occurrence."""
        refs = extract_references("/img/a.PNG and /img/a.png")

        assert len(refs) == 1
        assert refs[0].sanitized == "/img/a.PNG"
        assert refs[0].extension == ".png"

    def test_relative_and_home_paths(self):
        """Test ~, .. and plain relative paths are recognized in order."""
        assert sanitized("~/pics/cat.gif and ../up/dog.jpeg and docs/notes.pdf") == [
            "~/pics/cat.gif",
            "../up/dog.jpeg",
            "docs/notes.pdf",
        ]

    def test_bare_filename(self):
        """Test bare filenames with dots in the stem."""
        refs = extract_references("Attach report.final.PDF please")

        assert [ref.sanitized for ref in refs] == ["report.final.PDF"]
        assert refs[0].descriptor.kind == FILE
        assert refs[0].descriptor.mime == "application/pdf"

    def test_absolute_path_with_spaces(self):
        """Test absolute paths keep their spaces up to the extension."""
        assert sanitized("Look at /Users/me/My Photos/a.png now") == ["/Users/me/My Photos/a.png"]
        assert sanitized("(/srv/scan 1.pdf) and /srv/scan 2.pdf.") == ["/srv/scan 1.pdf", "/srv/scan 2.pdf"]

    def test_relative_path_stops_at_spaces(self):
        """Test relative paths don't swallow the preceding words."""
        assert sanitized("either/or then docs/x.png") == ["docs/x.png"]
        assert sanitized("foo/bar baz/qux.png") == ["baz/qux.png"]

    def test_drive_path_with_forward_slash(self):
        assert sanitized("open C:/scans/page.pdf now") == ["C:/scans/page.pdf"]

    def test_uppercase_scheme_is_remote(self):
        refs = extract_references("HTTPS://X.TEST/A.PNG")

        assert refs[0].is_remote is True
        assert refs[0].extension == ".png"

    @pytest.mark.parametrize("prompt", [
        "no references here",
        "notes.txt and /var/log/syslog",
        "photo.pngx",
        "archive.png.zip",
        "https://x.test/page.html",
        "https://x.test/download?file=a.png",
        "",
    ])
    def test_nothing_to_extract(self, prompt):
        """Test unsupported or malformed candidates are dropped silently."""
        assert extract_references(prompt) == []

    def test_extract_is_idempotent(self):
        """Test running twice gives identical ordered results."""
        extractor = ReferenceExtractor()
        prompt = "a.png b.gif https://x.test/c.pdf A.PNG"

        first = extractor.extract(prompt)
        second = extractor.extract(prompt)

        assert first == second
        assert [ref.sanitized for ref in first] == ["a.png", "b.gif", "https://x.test/c.pdf"]

    def test_reference_key(self):
        refs = extract_references("/Img/A.Png")
        assert refs[0].key == "/img/a.png"
