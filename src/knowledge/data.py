"""
KNS College knowledge: programme catalog and FAQ set.
"""

from .base import FaqEntry, KnowledgeBase, ProgrammeEntry, ProgrammeType

D = ProgrammeType.DIPLOMA
C = ProgrammeType.CERTIFICATE


# =============================================================================
# PROGRAMME CATALOG
# =============================================================================

PROGRAMMES = [
    # Diplomas
    ProgrammeEntry(
        name="Diploma in Cybersecurity",
        keywords=["cybersecurity", "cyber security", "security", "isc2", "cc"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Telecommunications",
        keywords=["telecommunications", "telecom", "telecommunication"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Computing & Networking",
        keywords=["computing", "networking", "ccst", "cisco networking"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in IT with Business Management",
        keywords=["it business", "it management", "business management", "it and business"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Software Development",
        keywords=["software development", "software engineering", "programming", "coding"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Project Management",
        keywords=["project management", "pmi", "project manager"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Enterprise and Small Business",
        keywords=["enterprise", "small business", "entrepreneurship", "esb", "business"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),
    ProgrammeEntry(
        name="Diploma in Applied Computerised Accounting & Intuit QuickBooks Technology",
        keywords=["accounting", "quickbooks", "intuit", "bookkeeping", "accountant"],
        type=D, duration="2 Years", mode="Online / Hybrid",
    ),

    # Certificates
    ProgrammeEntry(
        name="Digital Marketing with Meta Certified",
        keywords=["digital marketing", "meta", "marketing", "social media"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Data Analyst",
        keywords=["data analyst", "data analysis", "analytics", "data science"],
        type=C, duration="12 Weeks", mode="Online / Offline",
    ),
    ProgrammeEntry(
        name="Front End Web Development",
        keywords=["front end", "frontend", "web development", "html", "css", "javascript"],
        type=C, duration="8 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="Back End Web Development",
        keywords=["back end", "backend", "server", "mysql", "postgresql", "api"],
        type=C, duration="10 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="Full Stack Development",
        keywords=["full stack", "fullstack", "web development", "full stack developer"],
        type=C, duration="14 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="AI Prompt Engineering For Professionals",
        keywords=["ai prompt", "prompt engineering", "chatgpt", "gpt", "ai"],
        type=C, duration="3 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="AI for Web Design",
        keywords=["ai web design", "ai design", "web design ai"],
        type=C, duration="8 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="Microsoft Office Specialist",
        keywords=["microsoft office", "mos", "office specialist", "word", "excel", "powerpoint"],
        type=C, duration="5 Weeks", mode="Hybrid",
    ),
    ProgrammeEntry(
        name="Cisco Certified Support Technician (IT Support)",
        keywords=["cisco it support", "ccst it", "it support", "cisco support"],
        type=C, duration="16 Weeks", mode="Online / Tutor-Led",
    ),
    ProgrammeEntry(
        name="Cisco Certified Support Technician (Cybersecurity)",
        keywords=["cisco cybersecurity", "ccst cybersecurity", "cisco security"],
        type=C, duration="16 Weeks", mode="Online / Tutor-Led",
    ),
    ProgrammeEntry(
        name="Cisco Certified Support Technician (Networking)",
        keywords=["cisco networking", "ccst networking", "cisco network"],
        type=C, duration="16 Weeks", mode="Online / Tutor-Led",
    ),
    ProgrammeEntry(
        name="AutoDesk Certified User - Revit Architecture",
        keywords=["revit", "autodesk revit", "bim", "architecture"],
        type=C, duration="16 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="AutoDesk Certified User - AutoCAD",
        keywords=["autocad", "autodesk autocad", "cad", "drafting"],
        type=C, duration="16 Weeks", mode="Online / Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: AI-900 Azure AI Fundamentals",
        keywords=["ai900", "azure ai", "ai fundamentals", "microsoft ai"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: AZ-900 Azure Fundamentals",
        keywords=["az900", "azure fundamentals", "azure", "cloud"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: DP-900 Azure Data Fundamentals",
        keywords=["dp900", "azure data", "data fundamentals"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: MS-900 Microsoft 365 Fundamentals",
        keywords=["ms900", "microsoft 365", "office 365", "m365"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: PL-900 Power Platform Fundamentals",
        keywords=["pl900", "power platform", "power apps", "power automate"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
    ProgrammeEntry(
        name="Microsoft Certified: SC-900 Security, Compliance, and Identity Fundamentals",
        keywords=["sc900", "security fundamentals", "compliance", "identity"],
        type=C, duration="4 Weeks", mode="Instructor-Led",
    ),
]


# =============================================================================
# FAQ SET
# =============================================================================

FAQS = [
    # Admissions
    FaqEntry(
        keywords=["admission", "admissions", "apply", "application", "enroll", "enrollment",
                  "how to apply", "application process", "register", "registration", "sign up",
                  "join", "become student"],
        question="How do I apply for admission?",
        answer=(
            "You can apply for admission by visiting our Admissions page or contacting us directly. "
            "The application process is simple: 1) Choose your programme, 2) Apply online at "
            "www.kns.sl/apply, 3) Submit required documents, 4) Pay enrollment fee. We offer rolling "
            "enrollment with start dates in January, May, or September. Contact us at "
            "admission@kns.edu.sl or +232 79 422 442 for assistance."
        ),
    ),
    FaqEntry(
        keywords=["requirement", "requirements", "eligibility", "qualification", "qualify", "need",
                  "prerequisite", "prerequisites", "what do i need"],
        question="What are the admission requirements?",
        answer=(
            "Admission requirements vary by programme. Generally, you need a high school certificate "
            "or equivalent. Some programmes may have specific prerequisites. For detailed requirements "
            "for your chosen programme, please visit our Admissions page or contact our admissions "
            "office at admission@kns.edu.sl or +232 79 422 442."
        ),
    ),
    FaqEntry(
        keywords=["deadline", "deadlines", "when", "start date", "start dates", "intake", "semester",
                  "when can i start", "when does", "enrollment period"],
        question="When can I start my studies?",
        answer=(
            "We offer flexible start dates with rolling enrollment. You can begin your studies in "
            "January, May, or September. There's no strict deadline: you can apply anytime and start "
            "in the next available intake period. Contact our admissions office for the next "
            "available start date."
        ),
    ),
    FaqEntry(
        keywords=["enrollment fee", "application fee", "registration fee", "deposit", "how much to apply"],
        question="Is there an enrollment fee?",
        answer=(
            "Yes, there is an enrollment fee of Le1,000. This fee is required to secure your place in "
            "the programme. For detailed information about all fees, please contact our admissions "
            "office at admission@kns.edu.sl or +232 79 422 442."
        ),
    ),

    # Programmes & courses
    FaqEntry(
        keywords=["programme", "programmes", "course", "courses", "what programmes", "what courses",
                  "offer", "available", "study", "studies"],
        question="What programmes do you offer?",
        answer=(
            "We offer a comprehensive range of programmes including Diploma programmes (2 years), "
            "Certificate programmes (4 to 16 weeks), and Train & Certify Courses. Our programmes cover: "
            "Technology (Cybersecurity, Software Development, Networking, Telecommunications), Business "
            "(Project Management, Enterprise & Small Business, Accounting), and more. Visit our "
            "programmes page to see all available options."
        ),
    ),
    FaqEntry(
        keywords=["diploma", "diplomas", "diploma programme", "diploma course", "degree", "degrees"],
        question="What diploma programmes are available?",
        answer=(
            "We offer Diploma programmes in: Cybersecurity, Telecommunications, Computing & Networking, "
            "IT with Business Management, Software Development, Project Management, Enterprise & Small "
            "Business, and Applied Computerised Accounting. All diploma programmes are 2 years in "
            "duration and include globally recognized certification exam vouchers. Visit our "
            "programmes page for details."
        ),
    ),
    FaqEntry(
        keywords=["certificate", "certificates", "certificate programme", "certificate course",
                  "short course", "short courses"],
        question="What certificate programmes are available?",
        answer=(
            "We offer Certificate programmes in various fields including: Digital Marketing, Data "
            "Analyst, Front End Web Development, Back End Web Development, Full Stack Development, Cisco "
            "Networking, Cisco IT Support, Cisco Cybersecurity, Microsoft Azure, Microsoft AI, Microsoft "
            "Office, Autodesk AutoCAD, Autodesk Revit, and more. Certificate programmes range from 4 to "
            "16 weeks. Visit our programmes page for complete listings."
        ),
    ),
    FaqEntry(
        keywords=["cybersecurity", "cyber security", "security", "hacking", "ethical hacking",
                  "information security"],
        question="Do you offer cybersecurity programmes?",
        answer=(
            "Yes! We offer a Diploma in Cybersecurity (2 years) and Certificate in Cisco Cybersecurity. "
            "The diploma programme prepares you for the (ISC)² Certified in Cybersecurity (CC) "
            "certification with exam voucher included. Learn to protect digital systems and become a "
            "cybersecurity professional."
        ),
    ),
    FaqEntry(
        keywords=["software development", "software engineering", "programming", "coding", "developer",
                  "web development", "app development"],
        question="Do you offer software development programmes?",
        answer=(
            "Yes! We offer Diploma in Software Development (2 years) and Certificate Programmes in Front "
            "End Web Development, Back End Web Development, and Full Stack Development. Learn modern "
            "programming languages, frameworks, and development practices to become a skilled "
            "software developer."
        ),
    ),
    FaqEntry(
        keywords=["networking", "network", "cisco", "ccna", "ccst", "network administration"],
        question="Do you offer networking programmes?",
        answer=(
            "Yes! We offer Diploma in Computing & Networking (2 years) and Certificate programmes in "
            "Cisco Networking and Cisco IT Support. Learn network design, configuration, "
            "troubleshooting, and prepare for Cisco CCST Networking certification."
        ),
    ),
    FaqEntry(
        keywords=["business", "management", "project management", "pmi", "enterprise", "entrepreneurship"],
        question="Do you offer business programmes?",
        answer=(
            "Yes! We offer Diploma programmes in Project Management, Enterprise & Small Business, and "
            "Applied Computerised Accounting. We also offer Certificate programmes in Digital Marketing "
            "and Data Analyst. These programmes prepare you for PMI, ESB, and other business "
            "certifications."
        ),
    ),
    FaqEntry(
        keywords=["accounting", "accountant", "bookkeeping", "quickbooks", "intuit", "financial"],
        question="Do you offer accounting programmes?",
        answer=(
            "Yes! We offer Diploma in Applied Computerised Accounting & Intuit QuickBooks Technology "
            "(2 years). This programme prepares you for Intuit Certified Bookkeeping Professional "
            "certification and provides hands-on training in modern accounting software."
        ),
    ),
    FaqEntry(
        keywords=["microsoft", "azure", "office", "microsoft 365", "ms900", "az900", "ai900"],
        question="Do you offer Microsoft certification programmes?",
        answer=(
            "Yes! We offer Certificate programmes for Microsoft certifications including: Azure "
            "Fundamentals (AZ-900), Azure AI Fundamentals (AI-900), Azure Data Fundamentals (DP-900), "
            "Microsoft 365 Fundamentals (MS-900), Power Platform Fundamentals (PL-900), Security "
            "Fundamentals (SC-900), and Microsoft Office Specialist (MOS)."
        ),
    ),
    FaqEntry(
        keywords=["autocad", "autodesk", "revit", "cad", "drafting", "architecture", "engineering design"],
        question="Do you offer AutoCAD or Autodesk programmes?",
        answer=(
            "Yes! We offer Certificate programmes in Autodesk Certified User - AutoCAD and Autodesk "
            "Certified User - Revit Architecture. Learn 2D/3D CAD design, BIM modeling, and technical "
            "drawing skills for engineering and architecture."
        ),
    ),
    FaqEntry(
        keywords=["telecommunications", "telecom", "telecommunication", "mobile network", "fiber",
                  "network engineer"],
        question="Do you offer telecommunications programmes?",
        answer=(
            "Yes! We offer a Diploma in Telecommunications (2 years) covering modern telecommunication "
            "systems, mobile networks, fiber optics, and network management. This programme includes "
            "PMI Project Management Ready certification and prepares you for careers in Sierra "
            "Leone's telecom sector."
        ),
    ),
    FaqEntry(
        keywords=["digital marketing", "marketing", "social media", "meta", "facebook", "instagram",
                  "advertising"],
        question="Do you offer digital marketing programmes?",
        answer=(
            "Yes! We offer a Certificate programme in Digital Marketing with Meta Certified. Learn "
            "social media marketing, content marketing, advertising strategies, and earn Meta "
            "certification credentials. Duration is 4 weeks with instructor-led training."
        ),
    ),
    FaqEntry(
        keywords=["data analyst", "data analysis", "data science", "analytics", "excel", "sql", "statistics"],
        question="Do you offer data analysis programmes?",
        answer=(
            "Yes! We offer a Certificate programme in Data Analyst (12 weeks). Learn data analysis, "
            "visualization, statistical analysis, reporting, and master tools like Excel, SQL, and data "
            "visualization platforms. Available online or offline."
        ),
    ),

    # Fees & payment
    FaqEntry(
        keywords=["fee", "fees", "cost", "price", "pricing", "tuition", "how much", "payment", "pay",
                  "costs", "expense", "expensive", "affordable"],
        question="What are the fees?",
        answer=(
            "Our fees vary depending on the programme you choose. Diploma programmes (2 years) have "
            "different fees than Certificate programmes (4 to 16 weeks). Each diploma programme "
            "includes a voucher for a globally recognized certification exam. For detailed fee "
            "information for your specific programme of interest, please contact our admissions "
            "office at admission@kns.edu.sl or call +232 79 422 442."
        ),
    ),
    FaqEntry(
        keywords=["payment plan", "installment", "installments", "monthly payment", "pay monthly",
                  "financing", "scholarship", "scholarships", "financial aid", "discount"],
        question="Do you offer payment plans or scholarships?",
        answer=(
            "For information about payment plans, installments, scholarships, or financial assistance, "
            "please contact our admissions office directly at admission@kns.edu.sl or +232 79 422 442. "
            "We understand that financing education is important and are happy to discuss options "
            "with you."
        ),
    ),

    # Learning modes & schedule
    FaqEntry(
        keywords=["online", "distance", "remote", "elearning", "virtual", "online learning", "study online"],
        question="Do you offer online learning?",
        answer=(
            "Yes! We offer flexible study options including fully Online or Hybrid (online + in-person) "
            "learning. Our mobile-friendly platform allows 24/7 access to course materials, so you can "
            "learn at your own pace and fit your studies around your schedule. Many programmes are "
            "available online."
        ),
    ),
    FaqEntry(
        keywords=["hybrid", "blended", "parttime", "fulltime", "flexible", "schedule", "when are classes",
                  "class schedule", "class time"],
        question="What learning modes are available?",
        answer=(
            "We offer Online, Hybrid (online + in-person), and Instructor-Led options. Many programmes "
            "offer flexible scheduling to accommodate working professionals. Our mobile-friendly "
            "platform provides 24/7 access to course materials. Check specific programme details for "
            "available learning modes."
        ),
    ),
    FaqEntry(
        keywords=["duration", "length", "how long", "time", "period", "weeks", "months", "years", "semester"],
        question="How long are the programmes?",
        answer=(
            "Programme duration varies: Diploma programmes are 2 years, Certificate programmes range "
            "from 4 to 16 weeks depending on the course. For example, Microsoft certification courses "
            "are typically 4 weeks, while Data Analyst is 12 weeks, and some technology certificates "
            "are 16 weeks. Visit our programmes page for specific durations."
        ),
    ),
    FaqEntry(
        keywords=["schedule", "timetable", "class time", "when", "hours", "evening", "weekend", "morning",
                  "afternoon"],
        question="What is the class schedule?",
        answer=(
            "Class schedules vary by programme and learning mode. We offer flexible scheduling "
            "including evening and weekend options for working professionals. Online programmes allow "
            "you to study at your own pace. Contact us at admission@kns.edu.sl or +232 79 422 442 for "
            "specific schedule information for your programme of interest."
        ),
    ),

    # Certifications
    FaqEntry(
        keywords=["certification", "certificate", "certified", "credential", "badge", "certiport", "cisco",
                  "microsoft", "exam", "voucher"],
        question="What certifications are included?",
        answer=(
            "Every diploma programme includes a voucher for a globally recognized certification exam "
            "from partners like Cisco, (ISC)², PMI, and Microsoft. We also issue Credly Digital Badges "
            "for every qualification. Certificate programmes prepare you for specific certifications. "
            "Visit our programmes page to see which certifications are included with each programme."
        ),
    ),
    FaqEntry(
        keywords=["cisco", "ccna", "ccst", "cisco certification", "cisco exam"],
        question="What Cisco certifications do you offer?",
        answer=(
            "We offer programmes that prepare you for Cisco Certified Support Technician (CCST) "
            "Networking certification. Our Diploma in Computing & Networking includes CCST exam "
            "voucher. We also offer Certificate programmes in Cisco Networking, Cisco IT Support, and "
            "Cisco Cybersecurity."
        ),
    ),
    FaqEntry(
        keywords=["isc2", "isc", "(isc)²", "cybersecurity certification", "cc certification",
                  "certified in cybersecurity"],
        question="What (ISC)² certifications do you offer?",
        answer=(
            "Our Diploma in Cybersecurity prepares you for the (ISC)² Certified in Cybersecurity (CC) "
            "certification. The programme includes the exam voucher, so you can earn this globally "
            "recognized cybersecurity credential upon completion."
        ),
    ),
    FaqEntry(
        keywords=["pmi", "project management", "pm certification", "project management ready"],
        question="What PMI certifications do you offer?",
        answer=(
            "We offer programmes that prepare you for PMI Project Management Ready certification. Our "
            "Diploma in Project Management and Diploma in Telecommunications include PMI Project "
            "Management Ready certification with Credly badges."
        ),
    ),
    FaqEntry(
        keywords=["microsoft certification", "microsoft exam", "azure", "microsoft office", "mos"],
        question="What Microsoft certifications do you offer?",
        answer=(
            "We offer Certificate programmes for multiple Microsoft certifications: Azure Fundamentals "
            "(AZ-900), Azure AI Fundamentals (AI-900), Azure Data Fundamentals (DP-900), Microsoft 365 "
            "Fundamentals (MS-900), Power Platform Fundamentals (PL-900), Security Fundamentals "
            "(SC-900), and Microsoft Office Specialist (MOS)."
        ),
    ),
    FaqEntry(
        keywords=["intuit", "quickbooks", "bookkeeping", "bookkeeper", "accounting software"],
        question="What Intuit certifications do you offer?",
        answer=(
            "Our Diploma in Applied Computerised Accounting & Intuit QuickBooks Technology prepares you "
            "for Intuit Certified Bookkeeping Professional certification. Learn QuickBooks and modern "
            "accounting software through hands-on training."
        ),
    ),
    FaqEntry(
        keywords=["autodesk certification", "autocad certification", "revit certification"],
        question="What Autodesk certifications do you offer?",
        answer=(
            "We offer Certificate programmes for Autodesk Certified User - AutoCAD and Autodesk "
            "Certified User - Revit Architecture. These certifications validate your skills in CAD "
            "design and BIM modeling."
        ),
    ),
    FaqEntry(
        keywords=["testing", "exam", "test center", "pearson vue", "certiport", "take exam",
                  "where to take exam"],
        question="Can I take certification exams at KNS?",
        answer=(
            "Yes! KNS is an authorized Pearson VUE Select and Certiport Testing Center. This means you "
            "can train and test for global credentials like Cisco, (ISC)², Microsoft, PMI, Intuit "
            "QuickBooks, and Autodesk in a supportive and familiar environment. You don't need to "
            "travel elsewhere for your certification exams."
        ),
    ),
    FaqEntry(
        keywords=["badge", "digital badge", "credly", "verifiable", "linkedin", "share badge"],
        question="What are digital badges?",
        answer=(
            "We partner with Credly to issue a digital badge for every qualification you earn. These "
            "verifiable digital credentials allow you to share and showcase your skills with employers "
            "and on professional networks like LinkedIn. Digital badges give you a modern, competitive "
            "edge in the job market."
        ),
    ),

    # Location & facilities
    FaqEntry(
        keywords=["location", "located", "address", "where", "campus", "office", "find", "directions", "map"],
        question="Where is KNS College located?",
        answer=(
            "KNS College is located at 18 Dundas Street, Freetown, Sierra Leone. We are also an "
            "authorized Pearson VUE Select and Certiport Testing Center, so you can train and test in a "
            "familiar, supportive environment. Visit our Contact page for directions and more location "
            "details."
        ),
    ),
    FaqEntry(
        keywords=["facility", "facilities", "lab", "laboratory", "computer lab", "library", "resources",
                  "equipment"],
        question="What facilities do you have?",
        answer=(
            "KNS College has modern facilities including computer labs, testing centers for Pearson VUE "
            "and Certiport exams, and learning resources. As an authorized testing center, we provide a "
            "supportive environment for both training and certification exams. Contact us to learn "
            "more about our facilities."
        ),
    ),

    # Contact & support
    FaqEntry(
        keywords=["contact", "phone", "email", "whatsapp", "reach", "get in touch", "call", "message",
                  "support"],
        question="How can I contact you?",
        answer=(
            "You can reach us via Phone/WhatsApp at +232 79 422 442, Email at admission@kns.edu.sl (for "
            "admissions) or training@kns.edu.sl (for training inquiries), or visit our Contact page. Our "
            "office is located at 18 Dundas Street, Freetown, Sierra Leone. We're here to help!"
        ),
    ),
    FaqEntry(
        keywords=["email", "email address", "send email", "mail"],
        question="What is your email address?",
        answer=(
            "For admissions inquiries: admission@kns.edu.sl. For training inquiries: "
            "training@kns.edu.sl. You can also visit our Contact page for more ways to reach us."
        ),
    ),
    FaqEntry(
        keywords=["phone", "telephone", "call", "phone number", "mobile", "cell"],
        question="What is your phone number?",
        answer=(
            "You can reach us by phone or WhatsApp at +232 79 422 442. We're available to answer your "
            "questions and assist with admissions, programme information, and more."
        ),
    ),
    FaqEntry(
        keywords=["website", "url", "web address", "online", "visit"],
        question="What is your website?",
        answer=(
            "Our website is www.kns.sl. You can find detailed information about our programmes, "
            "admissions process, and contact details there. You can also apply online at "
            "www.kns.sl/apply."
        ),
    ),
    FaqEntry(
        keywords=["help", "support", "assistance", "need help", "question", "inquiry", "information"],
        question="How can I get help?",
        answer=(
            "We're here to help! You can contact us via Phone/WhatsApp at +232 79 422 442, Email at "
            "admission@kns.edu.sl, or visit our Contact page. Our admissions team is ready to assist "
            "with any questions about programmes, admissions, fees, or any other inquiries."
        ),
    ),

    # Recognition & accreditation
    FaqEntry(
        keywords=["recognition", "accredited", "accreditation", "ministry", "mocti", "champion",
                  "recognized", "official", "legitimate"],
        question="Is KNS College recognized?",
        answer=(
            "Yes! KNS College is recognized by the Ministry of Communication, Technology & Innovation "
            "(MoCTI) as the \"Digital Skills Champion 2025.\" We are also an authorized Pearson VUE "
            "Select and Certiport Testing Center. Our programmes and certifications are globally "
            "recognized and trusted by employers worldwide."
        ),
    ),
    FaqEntry(
        keywords=["accredited", "accreditation", "accredited by", "who accredits"],
        question="Is KNS College accredited?",
        answer=(
            "KNS College is recognized by the Ministry of Communication, Technology & Innovation "
            "(MoCTI) as the \"Digital Skills Champion 2025.\" We are authorized testing centers for "
            "Pearson VUE and Certiport, and our programmes include globally recognized certifications "
            "from partners like Cisco, (ISC)², PMI, and Microsoft."
        ),
    ),

    # Career & employment
    FaqEntry(
        keywords=["job", "career", "employment", "placement", "opportunities", "work",
                  "employment opportunities", "job placement", "career services"],
        question="What career opportunities are available?",
        answer=(
            "Our programmes are directly mapped to high-demand job roles in Sierra Leone and across "
            "West Africa. We provide career-focused pathways in technology, telecommunications, and "
            "business. Every programme includes globally recognized certifications that employers "
            "trust worldwide. Graduates find opportunities as cybersecurity professionals, network "
            "administrators, software developers, project managers, and more."
        ),
    ),
    FaqEntry(
        keywords=["job placement", "placement assistance", "career support", "help find job",
                  "employment support"],
        question="Do you help with job placement?",
        answer=(
            "While we don't guarantee job placement, our programmes are designed to prepare you for "
            "high-demand careers. We provide globally recognized certifications that employers value, "
            "career-focused training, and industry-integrated learning. Many of our graduates find "
            "success in their chosen fields. Contact us to learn more about career support services."
        ),
    ),

    # Corporate training
    FaqEntry(
        keywords=["corporate", "corporate training", "business training", "company training",
                  "employee training", "organization training"],
        question="Do you offer corporate training?",
        answer=(
            "Yes! We offer Corporate Training programmes for businesses and organizations. Our "
            "corporate training can be customized to meet your organization's specific needs. Contact "
            "us at training@kns.edu.sl or +232 79 422 442 to discuss your corporate training "
            "requirements."
        ),
    ),

    # General information
    FaqEntry(
        keywords=["about", "who are you", "what is kns", "college", "institution", "school", "university"],
        question="What is KNS College?",
        answer=(
            "Knowledge Network Solutions (KNS) College is Sierra Leone's premier institution for "
            "technology, telecommunications, and business education. We transform passionate learners "
            "into globally certified, job-ready professionals. Recognized as \"Digital Skills Champion "
            "2025\" by MoCTI, we offer industry-integrated programmes with globally recognized "
            "certifications from partners like Cisco, (ISC)², PMI, and Microsoft."
        ),
    ),
    FaqEntry(
        keywords=["vision", "mission", "goal", "purpose", "why", "why choose"],
        question="What is your vision and mission?",
        answer=(
            "Our Vision: To be West Africa's most trusted digital transformation partner, shaping a "
            "secure, connected, and digitally empowered future. Our Mission: To empower organizations "
            "and communities across Africa with innovative, secure, and human-centered digital "
            "solutions, strengthening capacity and driving sustainable digital transformation."
        ),
    ),
    FaqEntry(
        keywords=["why choose", "why kns", "benefits", "advantages", "what makes different", "unique",
                  "special"],
        question="Why should I choose KNS College?",
        answer=(
            "KNS College offers: Expert-led instruction from certified instructors, Industry-integrated "
            "learning, Global certifications included in programmes, Credly Digital Badges, Flexible "
            "study options (Online/Hybrid), Official testing center (Pearson VUE & Certiport), "
            "Career-focused pathways, and National recognition as \"Digital Skills Champion 2025.\" We "
            "bridge the gap between academic theory and real-world job requirements."
        ),
    ),
    FaqEntry(
        keywords=["instructor", "teacher", "faculty", "staff", "who teaches", "qualified", "experience"],
        question="Who are the instructors?",
        answer=(
            "Our instructors are certified professionals with years of real-world industry experience. "
            "They are expert-led instructors who bring practical knowledge and current industry "
            "practices to the classroom. Our faculty includes certified professionals in their "
            "respective fields."
        ),
    ),
    FaqEntry(
        keywords=["student", "students", "how many", "enrollment", "community"],
        question="How many students do you have?",
        answer=(
            "KNS College serves students across Sierra Leone and beyond. We welcome students from "
            "diverse backgrounds who are passionate about technology, telecommunications, and "
            "business. Contact our admissions office to learn more about our student community and "
            "enrollment."
        ),
    ),

    # Small talk
    FaqEntry(
        keywords=["hello", "hi", "hey", "greetings", "good morning", "good afternoon", "good evening"],
        question="Greeting",
        answer=(
            "Hello! <strong>Welcome to KNS College</strong>. I'm here to help answer your questions "
            "about our programmes, admissions, fees, certifications, and more. What would you like to "
            "know?"
        ),
    ),
    FaqEntry(
        keywords=["thank", "thanks", "thank you", "appreciate"],
        question="Thank you",
        answer=(
            "You're welcome! If you have any more questions, feel free to ask. You can also contact us "
            "directly at +232 79 422 442 or admission@kns.edu.sl for personalized assistance. Good "
            "luck with your educational journey!"
        ),
    ),
    FaqEntry(
        keywords=["bye", "goodbye", "see you", "farewell"],
        question="Goodbye",
        answer=(
            "Thank you for visiting KNS College! If you need any further assistance, don't hesitate to "
            "contact us at +232 79 422 442 or admission@kns.edu.sl. We wish you all the best in your "
            "educational journey!"
        ),
    ),
    FaqEntry(
        keywords=["okay", "ok", "alright", "sure", "got it", "understood", "fine", "yes", "yeah", "yep",
                  "yup", "acknowledge", "acknowledged"],
        question="Acknowledgment",
        answer=(
            "Great! Is there anything else you'd like to know about KNS College? I can help with "
            "information about programmes, admissions, fees, certifications, or anything else you need."
        ),
    ),
]


KNS_KNOWLEDGE = KnowledgeBase(
    institution_name="KNS College",
    programmes=PROGRAMMES,
    faqs=FAQS,
)
