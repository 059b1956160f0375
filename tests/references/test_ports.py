"""Tests for the default fetcher and filesystem."""

import os

import httpx

from chatbatch.references import FetchResponse, HttpxFetcher, LocalFileSystem


class TestFetchResponse:

    def test_success_range(self):
        assert FetchResponse(status_code=200).is_success
        assert FetchResponse(status_code=204).is_success
        assert not FetchResponse(status_code=302).is_success
        assert not FetchResponse(status_code=404).is_success
        assert not FetchResponse(status_code=500).is_success


class TestHttpxFetcher:
    """Tests for HttpxFetcher using a mock transport."""

    def test_fetch_returns_status_and_bytes(self):
        """Test the response body and status are passed through."""
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, content=b"%PDF")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        response = HttpxFetcher(client=client).fetch("https://x.test/c.pdf")

        assert seen == ["https://x.test/c.pdf"]
        assert response.status_code == 200
        assert response.content == b"%PDF"
        assert response.is_success

    def test_fetch_error_status_is_not_raised(self):
        """Test non-2xx responses are returned, not raised."""
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(503)))

        response = HttpxFetcher(client=client).fetch("https://x.test/c.pdf")

        assert response.status_code == 503
        assert not response.is_success

    def test_timeout_is_kept(self):
        assert HttpxFetcher(timeout=2.5).timeout == 2.5
        assert HttpxFetcher().timeout is None


class TestLocalFileSystem:
    """Tests for LocalFileSystem."""

    def test_reads_regular_files(self, tmp_path):
        path = tmp_path / "a.pdf"
        path.write_bytes(b"data")
        filesystem = LocalFileSystem()

        assert filesystem.is_file(str(path))
        assert filesystem.read_bytes(str(path)) == b"data"

    def test_directories_and_missing_paths(self, tmp_path):
        filesystem = LocalFileSystem()

        assert not filesystem.is_file(str(tmp_path))
        assert not filesystem.is_file(str(tmp_path / "missing.png"))

    def test_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert os.path.realpath(LocalFileSystem().cwd()) == os.path.realpath(str(tmp_path))
