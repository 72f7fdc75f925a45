"""Tests for origin classification and region extraction."""

import pytest

from origin_signer.errors import RegionExtractionError, SigningConfigurationError
from origin_signer.origin import extract_region, is_signable_origin


class TestIsSignableOrigin:
    """Tests for function URL detection."""

    @pytest.mark.parametrize(
        "domain",
        [
            "abc123.lambda-url.us-east-1.on.aws",
            "z7ubmlvh4nhpxdqdzk3zbwgrfq0ujvkg.lambda-url.eu-west-2.on.aws",
            "ABC123.LAMBDA-URL.AP-SOUTHEAST-2.ON.AWS",
        ],
    )
    def test_function_urls_are_signable(self, domain: str) -> None:
        assert is_signable_origin(domain) is True

    @pytest.mark.parametrize(
        "domain",
        [
            "assets.s3.us-east-1.amazonaws.com",
            "abc123.execute-api.us-east-1.amazonaws.com",
            "www.example.com",
            "abc123.lambda-url.us-east-1.on.aws.evil.com",
            "evil.com.abc123.lambda-url.us-east-1.on.aws",
            "lambda-url.us-east-1.on.aws",
            "",
            None,
        ],
    )
    def test_other_domains_are_not_signable(self, domain: str | None) -> None:
        assert is_signable_origin(domain) is False


class TestExtractRegion:
    """Tests for region extraction."""

    def test_extracts_third_segment(self) -> None:
        assert extract_region("abc.lambda-url.eu-west-2.on.aws") == "eu-west-2"

    def test_lowercases_region(self) -> None:
        assert extract_region("ABC.LAMBDA-URL.US-EAST-1.ON.AWS") == "us-east-1"

    @pytest.mark.parametrize("domain", ["bad-domain", "a.b", "a.b.", ""])
    def test_raises_without_region_segment(self, domain: str) -> None:
        with pytest.raises(RegionExtractionError, match="Cannot extract region"):
            extract_region(domain)

    def test_region_error_is_configuration_error(self) -> None:
        with pytest.raises(SigningConfigurationError) as exc_info:
            extract_region("bad-domain")
        assert exc_info.value.kind == "configuration_error"
        assert exc_info.value.domain == "bad-domain"  # type: ignore[attr-defined]
