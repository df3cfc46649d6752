"""
Validation objectives and the gating predicates derived from them.

An objective names the certification profile a document is validated
against. It decides which pipeline stages are in scope:
- Structural validation always runs
- Vocabulary validation is excluded for IG-only and non-specific objectives
  (and for legacy MU2 objectives, which the structural adapter reports)
- Content validation only runs for the 2015 edition unique-content objectives

All comparisons are case-insensitive.
"""

from typing import Iterable, Optional


class Sender:
    """Objectives for documents produced by a sending system."""

    B1_TOC_AMB_170_315 = "170.315_b1_ToC_Amb"
    B1_TOC_INP_170_315 = "170.315_b1_ToC_Inp"
    B4_CCDS_AMB_170_315 = "170.315_b4_CCDS_Amb"
    B4_CCDS_INP_170_315 = "170.315_b4_CCDS_Inp"
    B6_DE_AMB_170_315 = "170.315_b6_DE_Amb"
    B6_DE_INP_170_315 = "170.315_b6_DE_Inp"
    B7_DS4P_AMB_170_315 = "170.315_b7_DS4P_Amb"
    B7_DS4P_INP_170_315 = "170.315_b7_DS4P_Inp"
    B9_CP_AMB_170_315 = "170.315_b9_CP_Amb"
    B9_CP_INP_170_315 = "170.315_b9_CP_Inp"
    E1_VDT_AMB_170_315 = "170.315_e1_VDT_Amb"
    E1_VDT_INP_170_315 = "170.315_e1_VDT_Inp"
    G9_APIACCESS_AMB_170_315 = "170.315_g9_APIAccess_Amb"
    G9_APIACCESS_INP_170_315 = "170.315_g9_APIAccess_Inp"
    C_CDA_IG_ONLY = "C-CDA_IG_Only"
    C_CDA_IG_PLUS_VOCAB = "C-CDA_IG_Plus_Vocab"


class Receiver:
    """Objectives for documents consumed by a receiving system."""

    B1_TOC_AMB_170_315 = "170.315_b1_ToC_Amb"
    B1_TOC_INP_170_315 = "170.315_b1_ToC_Inp"
    B2_CIRP_AMB_170_315 = "170.315_b2_CIRP_Amb"
    B2_CIRP_INP_170_315 = "170.315_b2_CIRP_Inp"
    B5_CCDS_AMB_170_315 = "170.315_b5_CCDS_Amb"
    B5_CCDS_INP_170_315 = "170.315_b5_CCDS_Inp"
    B8_DS4P_AMB_170_315 = "170.315_b8_DS4P_Amb"
    B8_DS4P_INP_170_315 = "170.315_b8_DS4P_Inp"
    B9_CP_AMB_170_315 = "170.315_b9_CP_Amb"
    B9_CP_INP_170_315 = "170.315_b9_CP_Inp"


class CCDATypes:
    """Document-type objectives, including the legacy 2014 edition (MU2) types."""

    CLINICAL_OFFICE_VISIT_SUMMARY = "ClinicalOfficeVisitSummary"
    TRANSITIONS_OF_CARE_AMBULATORY_SUMMARY = "TransitionsOfCareAmbulatorySummary"
    TRANSITIONS_OF_CARE_INPATIENT_SUMMARY = "TransitionsOfCareInpatientSummary"
    VDT_AMBULATORY_SUMMARY = "VDTAmbulatorySummary"
    VDT_INPATIENT_SUMMARY = "VDTInpatientSummary"
    NON_SPECIFIC_CCDA = "NonSpecificCCDA"
    NON_SPECIFIC_CCDAR2 = "NonSpecificCCDAR2"


ALL_UNIQUE_CONTENT_ONLY: tuple[str, ...] = tuple(dict.fromkeys((
    Sender.B1_TOC_AMB_170_315,
    Sender.B1_TOC_INP_170_315,
    Sender.B4_CCDS_AMB_170_315,
    Sender.B4_CCDS_INP_170_315,
    Sender.B6_DE_AMB_170_315,
    Sender.B6_DE_INP_170_315,
    Sender.B7_DS4P_AMB_170_315,
    Sender.B7_DS4P_INP_170_315,
    Sender.B9_CP_AMB_170_315,
    Sender.B9_CP_INP_170_315,
    Sender.E1_VDT_AMB_170_315,
    Sender.E1_VDT_INP_170_315,
    Sender.G9_APIACCESS_AMB_170_315,
    Sender.G9_APIACCESS_INP_170_315,
    Receiver.B1_TOC_AMB_170_315,
    Receiver.B1_TOC_INP_170_315,
    Receiver.B2_CIRP_AMB_170_315,
    Receiver.B2_CIRP_INP_170_315,
    Receiver.B5_CCDS_AMB_170_315,
    Receiver.B5_CCDS_INP_170_315,
    Receiver.B8_DS4P_AMB_170_315,
    Receiver.B8_DS4P_INP_170_315,
    Receiver.B9_CP_AMB_170_315,
    Receiver.B9_CP_INP_170_315,
)))


def is_objective_of_type(objective: Optional[str], objectives: Iterable[str]) -> bool:
    """True if `objective` matches any entry of `objectives`, ignoring case."""
    if objective is None:
        return False
    wanted = objective.casefold()
    return any(candidate.casefold() == wanted for candidate in objectives)


def objective_allows_vocabulary(
    objective: Optional[str], alternate_certification: bool = False
) -> bool:
    """
    Whether vocabulary (and therefore content) validation may run.

    Args:
        objective: Requested validation objective
        alternate_certification: Structural adapter reported a legacy MU2 objective

    Returns:
        False for IG-only, non-specific and MU2 objectives, True otherwise
    """
    return (
        not is_objective_of_type(objective, (Sender.C_CDA_IG_ONLY,))
        and not alternate_certification
        and not is_objective_of_type(objective, (CCDATypes.NON_SPECIFIC_CCDA,))
    )


def objective_allows_content(objective: Optional[str]) -> bool:
    """Whether the objective is one of the unique-content objectives."""
    return is_objective_of_type(objective, ALL_UNIQUE_CONTENT_ONLY)
