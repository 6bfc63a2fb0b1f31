"""Shared enums and base model used across salary predictor domain models."""

from enum import StrEnum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


# --- Shared enums ---


class Country(StrEnum):
    """Countries covered by the reference dataset."""

    JAPAN = "japan"
    USA = "usa"


class Education(StrEnum):
    """Highest completed education level."""

    HIGH_SCHOOL = "high-school"
    VOCATIONAL = "vocational"
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"


class Experience(StrEnum):
    """Years of professional experience, bucketed."""

    YEARS_0_2 = "0-2"
    YEARS_3_5 = "3-5"
    YEARS_6_10 = "6-10"
    YEARS_11_15 = "11-15"
    YEARS_16_20 = "16-20"
    YEARS_20_PLUS = "20+"


class JobCategory(StrEnum):
    """Job category."""

    SOFTWARE_ENGINEER = "software-engineer"
    DATA_SCIENTIST = "data-scientist"
    PROJECT_MANAGER = "project-manager"
    MARKETING = "marketing"
    SALES = "sales"
    FINANCE = "finance"
    HR = "hr"
    CONSULTANT = "consultant"
    DESIGNER = "designer"
    RESEARCHER = "researcher"


class Industry(StrEnum):
    """Industry used for the multiplicative salary adjustment."""

    TECHNOLOGY = "technology"
    FINANCE = "finance"
    HEALTHCARE = "healthcare"
    MANUFACTURING = "manufacturing"
    CONSULTING = "consulting"
    RETAIL = "retail"
    ENERGY = "energy"
    MEDIA = "media"
    AUTOMOTIVE = "automotive"
    PHARMACEUTICAL = "pharmaceutical"
    EDUCATION = "education"
    GOVERNMENT = "government"


# --- Base model ---


class SalaryPredictorBase(BaseModel):
    """Base model with common configuration for all salary predictor models.

    Fields are snake_case in Python and camelCase on the wire, matching the
    reference document and the browser form.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "protected_namespaces": (),
    }
