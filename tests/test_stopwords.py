"""Test stopword loading and download."""

from unittest.mock import Mock, patch

import pytest
import requests
from sentiview.core.constants import TextConstants
from sentiview.services.stopwords import StopwordRepository


class TestStopwordRepository:
    """Test the stopword repository."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "id.txt"
        path.write_text("Yang\r\n  dan \n\nATAU\n", encoding="utf-8")

        stopwords = StopwordRepository(str(path)).load()

        assert {"yang", "dan", "atau"} <= stopwords
        assert "" not in stopwords
        assert TextConstants.FILLER_TOKENS <= stopwords
        assert "di" not in stopwords  # the fallback list is not merged in

    def test_missing_file_uses_fallback(self, tmp_path):
        stopwords = StopwordRepository(str(tmp_path / "missing.txt")).load()

        assert TextConstants.FALLBACK_STOPWORDS <= stopwords
        assert {"lol", "hix", "huft"} <= stopwords

    def test_loaded_once(self, tmp_path):
        path = tmp_path / "id.txt"
        path.write_text("yang\n", encoding="utf-8")
        repo = StopwordRepository(str(path))

        first = repo.load()
        path.write_text("lain\n", encoding="utf-8")
        assert repo.load() is first
        assert "lain" not in repo.load()

    @patch('sentiview.services.stopwords.requests.get')
    def test_download(self, mock_get, tmp_path):
        mock_get.return_value = Mock(text="yang\ndan\n", raise_for_status=Mock())
        dest = tmp_path / "nested" / "id.txt"

        saved = StopwordRepository.download("https://example.com/id.txt", str(dest), timeout=3)

        assert saved == dest
        assert dest.read_text(encoding="utf-8") == "yang\ndan\n"
        mock_get.assert_called_once_with("https://example.com/id.txt", timeout=3)

    @patch('sentiview.services.stopwords.requests.get')
    def test_download_http_error(self, mock_get, tmp_path):
        response = Mock(text="")
        response.raise_for_status.side_effect = requests.HTTPError("404")
        mock_get.return_value = response

        with pytest.raises(requests.HTTPError):
            StopwordRepository.download("https://example.com/id.txt", str(tmp_path / "id.txt"))
