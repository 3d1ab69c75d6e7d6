"""Sample SOP documents for demos and smoke tests.

Each sample is fixed text, so validating it always gives the same result.
"""

COMPLIANT_SOP = """STANDARD OPERATING PROCEDURE

Title: Incoming Material Inspection
Document ID: SOP-123
Version: 1.0
Effective Date: 2024-01-15

Purpose:
This procedure establishes requirements for inspecting incoming materials.

Scope:
Applies to all manufacturing and quality control operations.

Responsibilities:
Quality Manager: Overall responsibility for implementation
Department Heads: Day-to-day execution

Definitions:
GMP: Good Manufacturing Practice
QA: Quality Assurance

Procedure:
1. Review incoming materials for compliance
2. Verify supplier certificates of analysis
3. Document all inspection results
4. Submit nonconforming materials for disposition

References:
- ISO 13485:2016 Medical devices, Quality management systems
- 21 CFR Part 820 Quality System Regulation (2018)

Revision History:
Version 1.0 - Initial release (2024-01-15)

Approvals:
Prepared by: Sarah Johnson, Quality Manager
Reviewed by: David Brown, Operations Director
Approved by: Jennifer Martinez, VP Quality
"""

DEFICIENT_SOP = """STANDARD OPERATING PROCEDURE

Title: Cleaning Procedure
Document ID: DOC-001
Version: 1.0
Effective Date: TBD

Purpose:
TBD - This section needs to be completed.

Scope:
All operations

Procedure:
1. Start process
2. Complete work

References:
- ICH Q7
- ISO 13485
- Additional references TBD

Approvals:
Prepared by: TBD
Reviewed by: TBD
Approved by: TBD


Note: This document contains filler text (lorem ipsum) that needs to be replaced with actual content.
"""

OUTDATED_REFERENCES_SOP = COMPLIANT_SOP.replace(
    "- 21 CFR Part 820 Quality System Regulation (2018)",
    "- ICH Q7: Good Manufacturing Practice Guide for Active Pharmaceutical Ingredients (2000)",
)

SAMPLE_DOCUMENTS = [
    {
        "id": "compliant",
        "name": "Incoming Material Inspection",
        "description": "Complete SOP with every required section, valid metadata and signatures",
        "content": COMPLIANT_SOP,
    },
    {
        "id": "deficient",
        "name": "Cleaning Procedure (draft)",
        "description": "Draft SOP with missing sections, placeholder text and unsigned approvals",
        "content": DEFICIENT_SOP,
    },
    {
        "id": "outdated_references",
        "name": "Incoming Material Inspection (old references)",
        "description": "Otherwise complete SOP citing a reference published before 2010",
        "content": OUTDATED_REFERENCES_SOP,
    },
]
