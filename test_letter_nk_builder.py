"""
Tests for LetterNKBuilder - letter to the tax committee (013).
"""

import pytest

from didox_sdk import builders
from didox_sdk.domain.entities import LetterAttachmentDraft
from didox_sdk.shared.errors import MissingRequiredSectionError

HTML = '<p>Dear colleagues,</p><script>alert("x")</script>'


def complete_builder():
    return (
        builders.letter_nk()
        .letter("L-1", "2025-02-07")
        .sender(
            name="Sender LLC",
            tin="123456789",
            head={"email": "office@sender.uz", "phones": ["+998901234567"]},
        )
        .recipient(name="Tax Committee", tin="200000000")
        .html(HTML)
    )


def test_letter_payload() -> None:
    payload = complete_builder().build()

    assert payload["Letter"] == {"Number": "L-1", "Date": "2025-02-07"}
    assert payload["Sender"] == {
        "Name": "Sender LLC",
        "Tin": "123456789",
        "Head": {
            "BranchCode": "",
            "BranchName": "",
            "Email": "office@sender.uz",
            "Website": None,
            "LogoBase64": "",
            "Phones": ["+998901234567"],
        },
    }
    assert payload["Attachments"] == []


def test_letter_head_defaults_without_head() -> None:
    """Without a head block every field is "" except Website, which is null."""
    head = complete_builder().build()["Recipient"]["Head"]

    assert head == {
        "BranchCode": "",
        "BranchName": "",
        "Email": "",
        "Website": None,
        "LogoBase64": "",
        "Phones": [],
    }


def test_letter_html_is_not_escaped() -> None:
    assert complete_builder().build()["Html"] == HTML


def test_letter_attachments() -> None:
    payload = (
        complete_builder()
        .add_attachment(
            filename="act.pdf", mime_type="application/pdf", size=1024, base64="JVBER"
        )
        .add_attachments(
            [
                LetterAttachmentDraft(
                    filename="scan.png",
                    mime_type="image/png",
                    size=2048,
                    base64="iVBOR",
                    description="Signed scan",
                )
            ]
        )
        .build()
    )

    assert payload["Attachments"] == [
        {
            "Filename": "act.pdf",
            "MimeType": "application/pdf",
            "Size": 1024,
            "ContentBase64": "JVBER",
            "Description": "",
        },
        {
            "Filename": "scan.png",
            "MimeType": "image/png",
            "Size": 2048,
            "ContentBase64": "iVBOR",
            "Description": "Signed scan",
        },
    ]


@pytest.mark.parametrize("missing", ["letter", "sender", "recipient", "html"])
def test_letter_missing_section(missing: str) -> None:
    builder = builders.letter_nk()
    if missing != "letter":
        builder.letter("L-1", "2025-02-07")
    if missing != "sender":
        builder.sender(name="Sender LLC", tin="123456789")
    if missing != "recipient":
        builder.recipient(name="Tax Committee", tin="200000000")
    if missing != "html":
        builder.html(HTML)

    with pytest.raises(MissingRequiredSectionError) as exc_info:
        builder.build()

    assert exc_info.value.section == missing
    assert exc_info.value.document_type == "013"


def test_letter_empty_html_is_rejected() -> None:
    with pytest.raises(MissingRequiredSectionError):
        complete_builder().html("").build()


def test_letter_phones_are_copied() -> None:
    phones = ["+998901234567"]
    builder = complete_builder().sender(
        name="Sender LLC", tin="123456789", head={"phones": phones}
    )

    phones.append("+998907654321")
    payload = builder.build()
    payload["Sender"]["Head"]["Phones"].append("+998900000000")

    assert builder.build()["Sender"]["Head"]["Phones"] == ["+998901234567"]


def test_letter_raw_is_deep_merged() -> None:
    payload = (
        complete_builder().raw({"Sender": {"Head": {"Website": "https://sender.uz"}}}).build()
    )

    assert payload["Sender"]["Head"]["Website"] == "https://sender.uz"
    assert payload["Sender"]["Head"]["Email"] == "office@sender.uz"
    assert payload["Sender"]["Name"] == "Sender LLC"
