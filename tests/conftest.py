"""Pytest configuration and fixtures"""

import pytest

from ghana_legal_docs.models.records import TenancyRecord, VehicleTransferRecord


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    """Point output and draft storage at a temporary directory"""
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    monkeypatch.setenv("DRAFTS_PATH", str(tmp_path / "drafts.db"))
    monkeypatch.setenv("OPEN_PRINT_VIEW", "false")

    yield

    # Cleanup handled by tmp_path fixture


@pytest.fixture
def tenancy_record():
    return TenancyRecord(
        date_of_agreement="2025-06-03",
        landlord_name="Kwame Mensah",
        landlord_phone="0244111111",
        tenant_name="Ama Owusu",
        tenant_phone="0200222222",
        property_location="East Legon, Accra",
        start_date="2025-07-01",
        duration_value=2,
        duration_unit="Years",
        rent_amount=1500,
        rent_frequency="Month",
        witness1_name="Yaw Boateng",
        witness1_phone="0277333333",
        witness2_name="Efua Asante",
        witness2_phone="",
    )


@pytest.fixture
def vehicle_record():
    return VehicleTransferRecord(
        date_of_agreement="2025-06-11",
        seller_name="Kofi Adjei",
        seller_location="Kumasi",
        seller_phone="0244555555",
        buyer_name="Abena Darko",
        buyer_location="Tema",
        buyer_phone="0200666666",
        vehicle_color="Silver",
        vehicle_make="Toyota",
        vehicle_model="Corolla",
        registration_number="GR 1234-20",
        total_price=85000,
        amount_paid=50000,
        payment_deadline="2025-09-01",
        witness1_name="Kojo Ofori",
        witness2_name="Akosua Mensah",
    )
