#!/usr/bin/env python3
"""
Seed the knowledge base SQLite DB for demos or tests.

Creates data/agri_advisor.db (or KNOWLEDGE_DB_PATH) if missing, ensures the
tables exist, and inserts the demo corpus below. Use --reset to clear existing
knowledge rows first (the query log is left alone).

Run from project root:

    python scripts/seed_knowledge_db.py
    python scripts/seed_knowledge_db.py --reset
"""

import argparse
import sys
from pathlib import Path

# Project root on path so "app" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.core.knowledge_db import clear_documents, init_db, insert_document

# Demo corpus. crop_name/season/region left as None apply to every crop/season/region.
SEED_DOCUMENTS = [
    {
        "title": "Rice Cultivation in Kharif",
        "content": (
            "Rice is transplanted at the onset of the monsoon. Recommended NPK for high-yielding "
            "varieties is 120:60:40 kg/ha, with nitrogen split into three doses at transplanting, "
            "tillering and panicle initiation. Maintain 5 cm standing water during tillering."
        ),
        "category": "crop",
        "crop_name": "Rice",
        "season": "Kharif",
        "region": "Pan-India",
        "tags": ["rice", "npk", "transplanting", "monsoon"],
    },
    {
        "title": "Wheat Nutrient Schedule for Rabi",
        "content": (
            "Sow wheat between early and mid November. Apply NPK at 120:60:40 kg/ha; give half the "
            "nitrogen and all phosphorus and potassium at sowing, the rest at first irrigation "
            "(crown root initiation, about 21 days after sowing)."
        ),
        "category": "crop",
        "crop_name": "Wheat",
        "season": "Rabi",
        "region": "North India",
        "tags": ["wheat", "npk", "sowing", "rabi"],
    },
    {
        "title": "Tomato Planting and Temperature Needs",
        "content": (
            "Tomato seedlings are transplanted 25 to 30 days after sowing. Optimum temperature for "
            "fruit set is 20 to 25 degrees C; night temperatures below 13 degrees C cause flower drop."
        ),
        "category": "crop",
        "crop_name": "Tomato",
        "season": "Rabi",
        "region": None,
        "tags": ["tomato", "transplanting", "temperature"],
    },
    {
        "title": "Choosing Certified Seed",
        "content": (
            "Use certified seed of notified varieties from state seed corporations. Treat seed with "
            "fungicide before sowing and check germination on a small sample first."
        ),
        "category": "crop",
        "crop_name": None,
        "season": None,
        "region": None,
        "tags": ["seed", "variety", "germination"],
    },
    {
        "title": "Identifying Nitrogen Deficiency",
        "content": (
            "Nitrogen deficiency shows as uniform yellowing of older leaves starting from the tip. "
            "Correct with a urea top dressing or foliar spray of 2 percent urea."
        ),
        "category": "soil",
        "crop_name": None,
        "season": None,
        "region": None,
        "tags": ["nitrogen", "deficiency", "urea"],
    },
    {
        "title": "Phosphorus Deficiency Symptoms",
        "content": (
            "Phosphorus-deficient plants are stunted with purplish older leaves and poor root growth. "
            "Apply single super phosphate or DAP as a basal dose."
        ),
        "category": "soil",
        "crop_name": None,
        "season": None,
        "region": None,
        "tags": ["phosphorus", "deficiency", "dap"],
    },
    {
        "title": "Improving Soil Organic Matter",
        "content": (
            "Add farmyard manure or compost at 10 t/ha, grow green manure crops like dhaincha, and "
            "retain crop residue instead of burning it."
        ),
        "category": "soil",
        "crop_name": None,
        "season": None,
        "region": None,
        "tags": ["organic matter", "compost", "green manure"],
    },
    {
        "title": "PM-KISAN Income Support",
        "content": (
            "PM-KISAN pays eligible landholding farmer families Rs 6000 per year in three instalments "
            "directly to their bank account. Register through the PM-KISAN portal or a Common Service Centre "
            "with Aadhaar, land records and bank details."
        ),
        "category": "scheme",
        "crop_name": None,
        "season": None,
        "region": "Pan-India",
        "tags": ["pm-kisan", "income support", "registration"],
    },
    {
        "title": "Soil Health Card Scheme",
        "content": (
            "The Soil Health Card scheme provides farmers a card every two years with nutrient status "
            "of their soil and crop-wise fertilizer recommendations."
        ),
        "category": "scheme",
        "crop_name": None,
        "season": None,
        "region": "Pan-India",
        "tags": ["soil health card", "fertilizer"],
    },
    {
        "title": "Pradhan Mantri Fasal Bima Yojana",
        "content": (
            "PMFBY insures crops against non-preventable natural risks. Farmer premium is 2 percent for "
            "Kharif, 1.5 percent for Rabi food and oilseed crops, and 5 percent for commercial crops."
        ),
        "category": "scheme",
        "crop_name": None,
        "season": None,
        "region": "Pan-India",
        "tags": ["pmfby", "insurance"],
    },
    {
        "title": "Drip Irrigation for Cotton",
        "content": (
            "Drip irrigation in cotton saves 40 to 50 percent water and raises yield by up to 25 percent. "
            "Fertigation through drip improves nutrient use efficiency."
        ),
        "category": "productivity",
        "crop_name": "Cotton",
        "season": "Kharif",
        "region": "West India",
        "tags": ["drip", "irrigation", "cotton", "fertigation"],
    },
    {
        "title": "IPM for Cotton Bollworm",
        "content": (
            "Monitor with pheromone traps at 5 per hectare, release Trichogramma egg parasitoids, "
            "and spray neem-based products before resorting to chemical insecticides at economic threshold."
        ),
        "category": "productivity",
        "crop_name": "Cotton",
        "season": None,
        "region": None,
        "tags": ["ipm", "pest", "bollworm", "cotton"],
    },
    {
        "title": "Principles of Crop Rotation",
        "content": (
            "Alternate deep and shallow rooted crops, follow cereals with legumes to restore nitrogen, "
            "and avoid growing crops of the same family back to back to break pest cycles."
        ),
        "category": "productivity",
        "crop_name": None,
        "season": None,
        "region": None,
        "tags": ["rotation", "legumes", "sustainability"],
    },
    {
        "title": "Reading Weather Advisories",
        "content": (
            "District agromet advisories are issued twice a week by the India Meteorological Department "
            "and cover sowing windows, spray timing and irrigation scheduling."
        ),
        "category": "general",
        "crop_name": None,
        "season": None,
        "region": "Pan-India",
        "tags": ["weather", "advisory"],
    },
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the knowledge base for demos/tests.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear all existing knowledge rows before inserting the seed corpus.",
    )
    args = parser.parse_args()

    init_db()
    if args.reset:
        clear_documents()
        print("Cleared existing knowledge documents.")

    for doc in SEED_DOCUMENTS:
        insert_document(**doc)
        print(f"  added: [{doc['category']}] {doc['title']}")

    print(f"Done. Seeded {len(SEED_DOCUMENTS)} documents.")


if __name__ == "__main__":
    main()
