"""Japanese display labels for the enumerated form choices."""

from enum import StrEnum

from salary_predictor.models.common import (
    Education,
    Experience,
    Industry,
    JobCategory,
)


class ChoiceKind(StrEnum):
    """Form fields that carry enumerated choices."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    JOB_CATEGORY = "jobCategory"
    INDUSTRY = "industry"


EDUCATION_LABELS: dict[str, str] = {
    Education.HIGH_SCHOOL: "高校卒業",
    Education.VOCATIONAL: "専門学校・短大卒業",
    Education.BACHELOR: "大学卒業",
    Education.MASTER: "大学院修士課程修了",
    Education.PHD: "大学院博士課程修了",
}

EXPERIENCE_LABELS: dict[str, str] = {
    Experience.YEARS_0_2: "0-2年の経験",
    Experience.YEARS_3_5: "3-5年の経験",
    Experience.YEARS_6_10: "6-10年の経験",
    Experience.YEARS_11_15: "11-15年の経験",
    Experience.YEARS_16_20: "16-20年の経験",
    Experience.YEARS_20_PLUS: "20年以上の経験",
}

JOB_CATEGORY_LABELS: dict[str, str] = {
    JobCategory.SOFTWARE_ENGINEER: "ソフトウェアエンジニア",
    JobCategory.DATA_SCIENTIST: "データサイエンティスト",
    JobCategory.PROJECT_MANAGER: "プロジェクトマネージャー",
    JobCategory.MARKETING: "マーケティング職",
    JobCategory.SALES: "営業職",
    JobCategory.FINANCE: "財務・経理職",
    JobCategory.HR: "人事職",
    JobCategory.CONSULTANT: "コンサルタント",
    JobCategory.DESIGNER: "デザイナー",
    JobCategory.RESEARCHER: "研究職",
}

INDUSTRY_LABELS: dict[str, str] = {
    Industry.TECHNOLOGY: "テクノロジー・IT業界",
    Industry.FINANCE: "金融・銀行業界",
    Industry.HEALTHCARE: "医療・ヘルスケア業界",
    Industry.MANUFACTURING: "製造業界",
    Industry.CONSULTING: "コンサルティング業界",
    Industry.RETAIL: "小売・消費財業界",
    Industry.ENERGY: "エネルギー・資源業界",
    Industry.MEDIA: "メディア・広告業界",
    Industry.AUTOMOTIVE: "自動車業界",
    Industry.PHARMACEUTICAL: "製薬・バイオ業界",
    Industry.EDUCATION: "教育業界",
    Industry.GOVERNMENT: "公共・政府機関",
}

_LABELS: dict[ChoiceKind, dict[str, str]] = {
    ChoiceKind.EDUCATION: EDUCATION_LABELS,
    ChoiceKind.EXPERIENCE: EXPERIENCE_LABELS,
    ChoiceKind.JOB_CATEGORY: JOB_CATEGORY_LABELS,
    ChoiceKind.INDUSTRY: INDUSTRY_LABELS,
}


def label_for(kind: ChoiceKind | str, value: str) -> str:
    """Display label for a choice; unknown values are shown as-is."""
    return _LABELS[ChoiceKind(kind)].get(value, value)


def choices() -> dict[str, list[dict[str, str]]]:
    """All enumerated choices with labels, in declaration order."""
    return {
        kind.value: [{"value": str(v), "label": label} for v, label in table.items()]
        for kind, table in _LABELS.items()
    }
