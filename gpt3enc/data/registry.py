"""Registry of all assets."""

from pathlib import Path


class _BaseRegistry:

    @property
    def project_dir(self) -> Path:
        """Root directory for the git project."""
        return Path(__file__).parent.parent.parent

    @property
    def assets_dir(self) -> Path:
        """Root directory for all assets."""
        return Path(self.project_dir, "assets")


class EncodingRegistry(_BaseRegistry):
    """Registry of the published encoder resources, one directory per scheme."""

    SOURCE_BASE_URL = "https://openaipublic.blob.core.windows.net/gpt-2/encodings/main"

    ENCODER_FILE_NAME = "encoder.json"
    MERGES_FILE_NAME = "vocab.bpe"

    _BYTE = 1
    _KB = 1024 * _BYTE
    _MB = 1024 * _KB

    # Upper bound on a single downloaded resource. The published files are ~1MB and ~0.5MB.
    MAX_DOWNLOAD_SIZE = 8 * _MB

    @property
    def encodings_dir(self) -> Path:
        """Root directory for all encoder resources."""
        return Path(self.assets_dir, "encodings")

    def encoding_dir(self, scheme_name: str) -> Path:
        """Directory holding the resources of one scheme."""
        return Path(self.encodings_dir, scheme_name)

    def encoder_file(self, scheme_name: str) -> Path:
        """Path of the piece -> id table of one scheme."""
        return Path(self.encoding_dir(scheme_name), self.ENCODER_FILE_NAME)

    def merges_file(self, scheme_name: str) -> Path:
        """Path of the ordered merge list of one scheme."""
        return Path(self.encoding_dir(scheme_name), self.MERGES_FILE_NAME)

    def source_url(self, file_name: str) -> str:
        """Public URL a resource file is downloaded from."""
        return f"{self.SOURCE_BASE_URL}/{file_name}"
