"""Demo directory loaded when ``seed_demo_data`` is enabled."""

from __future__ import annotations

from drivya.schemas.organization import Organization

_RAW_ORGANIZATIONS = [
    {
        "id": "org-001",
        "name": "Future Educators Foundation",
        "type": "NGO",
        "website": "https://futureteachers.org",
        "headquarters": "Uttar Pradesh",
        "region": "Northern India",
        "focus_areas": ["Education", "Livelihood"],
        "mission": "Empowering rural communities through quality education and skill development programs.",
        "description": (
            "Works across Uttar Pradesh and Madhya Pradesh, providing educational resources "
            "and teacher training to over 50 schools."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Village Teacher Training Initiative", "year": 2023,
             "description": "Trained 500+ teachers in modern teaching methodologies"},
            {"title": "Digital Literacy Program", "year": 2023,
             "description": "Provided computer training to 2000+ students"},
        ],
        "funding_type": "recipient",
        "target_beneficiaries": ["School Children 6-18", "Rural Teachers"],
        "partner_history": ["UNICEF", "Global Fund for Education"],
        "confidence": 92,
    },
    {
        "id": "org-002",
        "name": "Health for All Initiative",
        "type": "Foundation",
        "website": "https://healthforall.org",
        "headquarters": "Maharashtra",
        "region": "Western India",
        "focus_areas": ["Health", "Environment"],
        "mission": "Ensuring access to quality healthcare in underserved communities across India.",
        "description": (
            "Operates mobile clinics and trains community health workers in rural "
            "Maharashtra and Gujarat, with a focus on preventive care."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Mobile Health Clinics", "year": 2024,
             "description": "Serving 10000+ patients annually across 50 villages"},
        ],
        "funding_type": "mixed",
        "target_beneficiaries": ["Rural Communities", "Women & Children"],
        "partner_history": ["WHO", "Gates Foundation"],
        "confidence": 88,
    },
    {
        "id": "org-003",
        "name": "Green Earth Collective",
        "type": "NGO",
        "website": "https://greenearthcollective.in",
        "headquarters": "Karnataka",
        "region": "Southern India",
        "focus_areas": ["Environment", "Livelihood"],
        "mission": "Promoting sustainable livelihoods through environmental conservation.",
        "description": (
            "Works on reforestation, organic farming and sustainable tourism in the "
            "Western Ghats with local communities."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Reforestation Program", "year": 2024,
             "description": "Community-led planting across degraded forest land"},
        ],
        "funding_type": "recipient",
        "target_beneficiaries": ["Forest Communities", "Farmers"],
        "partner_history": ["WWF India"],
        "confidence": 85,
    },
    {
        "id": "org-004",
        "name": "Tech Skills Academy",
        "type": "Incubator",
        "website": "https://techskillsacademy.com",
        "headquarters": "Bangalore",
        "region": "Southern India",
        "focus_areas": ["Technology", "Livelihood"],
        "mission": "Building tech talent from underrepresented communities through bootcamp and mentorship.",
        "description": (
            "Runs intensive coding bootcamps and provides job placement support for "
            "developers from low-income backgrounds."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Full Stack Development Bootcamp", "year": 2024,
             "description": "85% job placement rate, 500+ students graduated"},
            {"title": "Women in Tech Initiative", "year": 2023,
             "description": "30% female cohort with dedicated mentorship"},
        ],
        "funding_type": "mixed",
        "target_beneficiaries": ["Youth 18-30", "Women Developers"],
        "partner_history": ["Google", "Microsoft"],
        "confidence": 90,
    },
    {
        "id": "org-005",
        "name": "ACIC Innovation Hub",
        "type": "Incubator",
        "website": "https://acicinnovation.org",
        "headquarters": "Delhi",
        "region": "Northern India",
        "focus_areas": ["Technology", "Governance"],
        "mission": "Accelerating social enterprises solving India's critical challenges through innovation.",
        "description": (
            "Supports 50+ social enterprises annually through mentorship, funding and "
            "network access."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Accelerator Program", "year": 2024,
             "description": "Supporting 50+ social enterprises with $2M in funding"},
        ],
        "funding_type": "provider",
        "target_beneficiaries": ["Social Entrepreneurs", "Startups"],
        "partner_history": ["Omidyar Network", "World Economic Forum"],
        "confidence": 91,
    },
    {
        "id": "org-006",
        "name": "Vocational Skills India",
        "type": "NGO",
        "website": "https://vocationalskillsindia.org",
        "headquarters": "Andhra Pradesh",
        "region": "Southern India",
        "focus_areas": ["Livelihood", "Education"],
        "mission": "Providing vocational training to youth for employment and entrepreneurship.",
        "description": (
            "Runs training centres in rural Andhra Pradesh offering courses in "
            "construction, hospitality and healthcare."
        ),
        "verification_status": "unverified",
        "projects": [
            {"title": "Construction Skills Program", "year": 2024,
             "description": "Training 500+ construction workers with certification"},
        ],
        "funding_type": "recipient",
        "target_beneficiaries": ["Youth 16-30", "Rural Communities"],
        "partner_history": ["NITI Aayog"],
        "confidence": 72,
    },
    {
        "id": "org-007",
        "name": "Women Empowerment Network",
        "type": "NGO",
        "website": "https://womenempowermentnet.in",
        "headquarters": "Rajasthan",
        "region": "Western India",
        "focus_areas": ["Livelihood", "Governance"],
        "mission": "Empowering rural women through self-help groups and economic opportunities.",
        "description": (
            "Facilitates self-help groups across Rajasthan, providing microfinance, "
            "business training and market linkages."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Self-Help Group Network", "year": 2024,
             "description": "Supporting 500+ SHGs with $5M in microfinance"},
        ],
        "funding_type": "mixed",
        "target_beneficiaries": ["Rural Women", "Entrepreneurs"],
        "partner_history": ["NABARD", "Acumen Fund"],
        "confidence": 87,
    },
    {
        "id": "org-008",
        "name": "Youth Leadership Foundation",
        "type": "Foundation",
        "website": "https://youthleadership.org",
        "headquarters": "Tamil Nadu",
        "region": "Southern India",
        "focus_areas": ["Education", "Governance"],
        "mission": "Developing next-generation leaders through civic engagement and skills training.",
        "description": (
            "Runs leadership programs in schools, colleges and communities across "
            "Tamil Nadu."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "School Leadership Program", "year": 2024,
             "description": "Engaging 10000+ school students in civic activities"},
        ],
        "funding_type": "provider",
        "target_beneficiaries": ["Youth 12-25", "Students"],
        "partner_history": ["India Together", "Ashoka"],
        "confidence": 84,
    },
    {
        "id": "org-009",
        "name": "Clean Water Foundation",
        "type": "Foundation",
        "website": "https://cleanwaterfoundation.org",
        "headquarters": "Bihar",
        "region": "Eastern India",
        "focus_areas": ["Health", "Environment"],
        "mission": "Ensuring access to safe drinking water and sanitation in rural communities.",
        "description": (
            "Builds and maintains water systems in rural Bihar and provides hygiene "
            "education and community training."
        ),
        "verification_status": "verified",
        "projects": [
            {"title": "Water System Installation", "year": 2024,
             "description": "Built 200+ water systems benefiting 50000+ people"},
        ],
        "funding_type": "recipient",
        "target_beneficiaries": ["Rural Communities", "Women & Children"],
        "partner_history": ["Water Aid", "USAID"],
        "confidence": 89,
    },
    {
        "id": "org-010",
        "name": "Digital Innovation Lab",
        "type": "Incubator",
        "website": "https://digitalinnovationlab.in",
        "headquarters": "Hyderabad",
        "region": "Southern India",
        "focus_areas": ["Technology", "Governance"],
        "mission": "Enabling digital solutions for social good through innovation and collaboration.",
        "description": (
            "Works with social enterprises to develop tech solutions for governance, "
            "healthcare and education."
        ),
        "verification_status": "pending",
        "projects": [
            {"title": "Social Tech Accelerator", "year": 2024,
             "description": "Supporting 30+ tech-based social enterprises"},
        ],
        "funding_type": "provider",
        "target_beneficiaries": ["Social Entrepreneurs", "Communities"],
        "partner_history": ["Google.org"],
        "confidence": 79,
    },
]

SEED_ORGANIZATIONS: list[Organization] = [Organization.model_validate(raw) for raw in _RAW_ORGANIZATIONS]
