"""
Example script: build a transport waybill and an act, then submit them.

Usage:
    # Set credentials first (or put them into a .env file)
    export DIDOX_PARTNER_TOKEN="your-partner-token"
    export DIDOX_TAX_ID="123456789"
    export DIDOX_PASSWORD="your-password"

    # Build payloads only
    python example.py

    # Build and submit drafts to the stage environment
    python example.py --submit
"""

import json
import logging
import os
import sys

from dotenv import load_dotenv

from didox_sdk import DidoxClient, DidoxError, builders

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_waybill() -> dict:
    """Build a one-group transport waybill (120 km at 10 000 per km)."""
    return (
        builders.ttn()
        .waybill("TTN-001", "2025-02-07", delivery_type=2)
        .consignor(tin="123456789", name="Sender LLC")
        .consignee(tin="987654321", name="Receiver LLC")
        .carrier(tin="111222333", name="Carrier LLC")
        .transport(
            type=1,
            truck={"reg_no": "01A123BC", "model": "MAN TGX"},
            driver={"pinfl": "12345678901234", "full_name": "Karimov Aziz"},
        )
        .add_product_group(
            lambda group: group.loading_point(
                address="Tashkent, Chilonzor 1", tin="123456789", name="Main warehouse"
            )
            .unloading_point(address="Samarkand, Registan 5", tin="987654321", name="Store")
            .add_product(
                name="Cement M400",
                catalog_code="02523001001000000",
                catalog_name="Portland cement",
                package_code="1",
                package_name="bag",
                count=100,
                price=55000,
            )
        )
        .totals(distance_km=120, price_per_km=10000)
        .responsible_person(pinfl="98765432109876", full_name="Aliev Bobur")
        .build()
    )


def build_act() -> dict:
    """Build an act of completed work with VAT."""
    return (
        builders.act()
        .act("ACT-1", "2025-02-07", "Consulting services for February")
        .contract("C-12", "2025-01-10")
        .seller(tin="123456789", name="Seller LLC")
        .buyer(tin="987654321", name="Buyer LLC")
        .add_product(
            name="Consulting",
            catalog_code="10999001001000000",
            catalog_name="Services",
            package_code="1",
            package_name="hour",
            count=10,
            price=1000,
            vat_rate=12,
        )
        .flags(has_vat=True)
        .build()
    )


def main() -> int:
    """Build sample payloads and optionally submit them."""
    load_dotenv()

    waybill = build_waybill()
    act = build_act()
    logger.info(f"Waybill payload:\n{json.dumps(waybill, ensure_ascii=False, indent=2)}")
    logger.info(f"Act payload:\n{json.dumps(act, ensure_ascii=False, indent=2)}")

    if "--submit" not in sys.argv:
        return 0

    try:
        client = DidoxClient.from_env()
        login = client.auth.login_legal_entity(
            os.getenv("DIDOX_TAX_ID", ""), os.getenv("DIDOX_PASSWORD", "")
        )
        client.set_access_token(login["token"])

        logger.info(f"✓ Waybill draft: {client.documents.create_draft('041', waybill)}")
        logger.info(f"✓ Act draft: {client.documents.create_draft('005', act)}")
    except DidoxError as e:
        logger.error(f"Submission failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
