"""Document categories."""

from enum import StrEnum


class DocumentCategory(StrEnum):
    """Kind of project document."""

    SITE_PLAN = "Site Plan"
    BUILDING_PERMIT = "Building Permit"
    STRUCTURAL_DRAWINGS = "Structural Drawings"
    ELECTRICAL_PLANS = "Electrical Plans"
    PLUMBING_PLANS = "Plumbing Plans"
    HVAC_PLANS = "HVAC Plans"
    MATERIAL_SPECIFICATIONS = "Material Specifications"
    SAFETY_CERTIFICATES = "Safety Certificates"
    INSPECTION_REPORTS = "Inspection Reports"
    COMPLETION_CERTIFICATE = "Completion Certificate"
