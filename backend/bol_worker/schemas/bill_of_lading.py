"""
R&L Carriers Bill of Lading Schemas

Request and response bodies of the R&L BillOfLading endpoint. Field aliases
are the exact JSON names the carrier expects.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class Shipper(BaseModel):
    company_name: str = Field(default="", alias="CompanyName")
    address_line1: str = Field(default="", alias="AddressLine1")
    city: str = Field(default="", alias="City")
    state_or_province: str = Field(default="", alias="StateOrProvince")
    zip_or_postal_code: str = Field(default="", alias="ZipOrPostalCode")
    country_code: str = Field(default="", alias="CountryCode")
    phone_number: str = Field(default="", alias="PhoneNumber")

    class Config:
        populate_by_name = True


class Consignee(BaseModel):
    company_name: str = Field(default="", alias="CompanyName")
    address_line1: str = Field(default="", alias="AddressLine1")
    city: str = Field(default="", alias="City")
    state_or_province: str = Field(default="", alias="StateOrProvince")
    zip_or_postal_code: str = Field(default="", alias="ZipOrPostalCode")
    country_code: str = Field(default="", alias="CountryCode")

    class Config:
        populate_by_name = True


class BolItem(BaseModel):
    """One freight line on the BOL."""
    freight_class: str = Field(default="", alias="Class")
    pieces: int = Field(default=0, alias="Pieces")
    weight: int = Field(default=0, alias="Weight")
    package_type: str = Field(default="", alias="PackageType")
    description: str = Field(default="", alias="Description")

    class Config:
        populate_by_name = True


class BillOfLading(BaseModel):
    bol_date: str = Field(alias="BOLDate")  # MM/DD/YYYY
    shipper: Shipper = Field(alias="Shipper")
    consignee: Consignee = Field(alias="Consignee")
    items: List[BolItem] = Field(default_factory=list, alias="Items")

    class Config:
        populate_by_name = True


class BillOfLadingRequest(BaseModel):
    bill_of_lading: BillOfLading = Field(alias="BillOfLading")

    class Config:
        populate_by_name = True


class BillOfLadingResponse(BaseModel):
    """
    Carrier reply to a BOL request.

    Code 0 means the BOL was created; other values are carrier specific
    errors. ProNumber is the tracking number and may be empty on failure.

    A reply without Code is not a success, even with a ProNumber. Earlier
    integrations read a missing Code as 0; this one requires it explicitly.
    """
    pro_number: Optional[str] = Field(default=None, alias="ProNumber")
    code: Optional[int] = Field(default=None, alias="Code")

    class Config:
        populate_by_name = True

    @property
    def is_success(self) -> bool:
        return self.code == 0 and bool(self.pro_number)
