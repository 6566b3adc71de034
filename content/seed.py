"""
Demo content for a fresh database.

Every seeder upserts on the table's natural key, so running the seed twice
leaves one copy of each row.
"""
import logging

from django.db import DatabaseError, transaction
from django.utils.html import escape

from .models import (
    FAQ, ConsultationTimeSlot, EducationLevelOption, HomepageProcessStep, Service,
    SiteSettings, StudyDestination, StudyInterestOption, TestPrepCourse, Testimonial,
    University,
)

logger = logging.getLogger(__name__)


FAQS = [
    {
        'question': "What qualifications do I need to study abroad?",
        'answer': "Requirements vary significantly by country, university, and program. Generally, you'll need relevant academic qualifications, English language proficiency (e.g., IELTS, TOEFL for English-speaking countries), and sometimes program-specific entrance exams or portfolios.",
        'category': 'application',
        'display_order': 1,
    },
    {
        'question': "How much does it cost to study internationally?",
        'answer': "Costs vary widely. Tuition fees can range from being free or very low in some European countries to tens of thousands of dollars per year in countries like the USA or Australia. Living expenses also differ greatly by city and country.",
        'category': 'general',
        'display_order': 2,
    },
    {
        'question': "Can I work while studying abroad?",
        'answer': "Work rights for international students depend on the country's visa regulations. Many countries (e.g., Canada, Australia, UK, Germany) allow part-time work during studies (often up to 20 hours/week) and full-time during breaks.",
        'category': 'visa',
        'display_order': 3,
    },
    {
        'question': "How does Dream Edge help with the visa application process?",
        'answer': "We provide comprehensive visa assistance including document preparation, application review, mock interview preparation, and guidance throughout the entire process for various countries.",
        'category': 'visa',
        'display_order': 4,
    },
    {
        'question': "What scholarship opportunities are available for international students?",
        'answer': "Numerous scholarships are available globally, including government-funded scholarships (e.g., Fulbright, Chevening, DAAD), university-specific scholarships, and private organization awards.",
        'category': 'application',
        'display_order': 5,
    },
    {
        'question': "When should I start my application process for international universities?",
        'answer': "We recommend starting at least 12-18 months before your intended start date, as application timelines vary greatly between countries.",
        'category': 'application',
        'display_order': 6,
    },
    {
        'question': "What accommodation options are available for students abroad?",
        'answer': "Common options include university halls of residence, private student accommodation, private rentals, and homestays. Availability and cost vary by location and institution.",
        'category': 'accommodation',
        'display_order': 7,
    },
    {
        'question': "What support services do you provide after I receive my visa?",
        'answer': "Our support continues beyond visa approval. We provide pre-departure briefings covering culture, weather, the education system, banking, transportation, and essential items to pack.",
        'category': 'general',
        'display_order': 8,
    },
    {
        'question': "Which English proficiency tests are generally accepted by international universities?",
        'answer': "Most English-speaking universities accept IELTS Academic, TOEFL iBT, and Pearson PTE Academic. Some may also accept Cambridge English qualifications or Duolingo.",
        'category': 'test_preparation',
        'display_order': 9,
    },
    {
        'question': "What is a good IELTS score for international universities?",
        'answer': "Generally, a minimum overall IELTS Academic score of 6.0 to 6.5 is required for undergraduate courses, and 6.5 to 7.0 for postgraduate courses in English-speaking countries.",
        'category': 'test_preparation',
        'display_order': 10,
    },
    {
        'question': "How long is an IELTS/TOEFL score valid?",
        'answer': "Both IELTS and TOEFL scores are generally valid for two years from the test date.",
        'category': 'test_preparation',
        'display_order': 11,
    },
]

SERVICES = [
    {
        'name': "University Application Assistance",
        'slug': 'university-application',
        'short_description': "Expert guidance for international university applications",
        'full_description': "Our comprehensive university application service helps students identify suitable universities and programs globally, prepare compelling personal statements, submit applications, and secure admission offers.",
        'icon_name': 'academic-cap',
        'benefits': [
            "Personalized university selection based on academic profile & destination preferences",
            "Professional review of personal statements & essays",
            "Application tracking and follow-up for multiple countries",
            "Interview preparation for competitive programs worldwide",
            "Guidance on offer acceptance strategies",
        ],
        'display_order': 1,
    },
    {
        'name': "Student Visa Consultancy",
        'slug': 'visa-consultancy',
        'short_description': "Expert student visa assistance for USA, UK, Canada, Australia, Europe, New Zealand & Japan",
        'full_description': "Our visa consultancy service provides support throughout the student visa application process. We help prepare complete documentation, review applications thoroughly, and coach students for visa interviews.",
        'icon_name': 'document-text',
        'benefits': [
            "Country-specific document preparation",
            "Application review by experienced consultants",
            "Mock visa interview sessions",
            "Financial documentation assistance",
            "Guidance on proof of accommodation and travel insurance",
        ],
        'display_order': 2,
    },
    {
        'name': "Scholarship Guidance",
        'slug': 'scholarship-guidance',
        'short_description': "Securing scholarships & financial aid for studying abroad",
        'full_description': "Our scholarship guidance service helps students identify and apply for financial aid opportunities, including government-funded programs like Fulbright, Chevening, DAAD and MEXT.",
        'icon_name': 'currency-dollar',
        'benefits': [
            "Access to scholarships database",
            "Eligibility assessment for country-specific and international scholarships",
            "Essay review for competitive scholarship applications",
            "Interview coaching for scholarship selection panels",
        ],
        'display_order': 3,
    },
    {
        'name': "Test Preparation",
        'slug': 'test-preparation',
        'short_description': "Expert IELTS, TOEFL, PTE, GRE, GMAT coaching for studying abroad",
        'full_description': "Our test preparation programs help students achieve target scores on English proficiency exams and standardized tests required for university admissions.",
        'icon_name': 'pencil',
        'benefits': [
            "Expert instructors with proven track records",
            "Personalized study plans",
            "Regular practice tests and evaluations",
            "Score improvement strategies for each test section",
        ],
        'display_order': 4,
    },
    {
        'name': "Pre-Departure Briefing",
        'slug': 'pre-departure-briefing',
        'short_description': "Comprehensive preparation for life abroad",
        'full_description': "Our pre-departure briefing prepares students for life in their chosen study destination: local culture, weather, accommodation, banking, transportation, healthcare and safety.",
        'icon_name': 'airplane',
        'benefits': [
            "Country-specific cultural adaptation guidance",
            "Practical packing advice",
            "Banking, SIM cards, and transportation setup information",
            "Emergency contacts and safety tips",
        ],
        'display_order': 5,
    },
]

TESTIMONIALS = [
    {
        'name': "Anisha Sharma",
        'photo_url': "https://randomuser.me/api/portraits/women/32.jpg",
        'quote': "Dream Edge guided me through every step of my university application process. I'm now studying at the University of Manchester, UK!",
        'program': "MSc International Business",
        'university': "University of Manchester, UK",
        'category': "University Application",
        'status': 'published',
    },
    {
        'name': "Rajesh Poudel",
        'photo_url': "https://randomuser.me/api/portraits/men/45.jpg",
        'quote': "The IELTS preparation course was excellent. The instructors helped me achieve a band score of 7.5.",
        'program': "BEng Civil Engineering",
        'university': "University of Leeds",
        'category': "Test Preparation",
        'status': 'published',
    },
    {
        'name': "Smriti Thapa",
        'photo_url': "https://randomuser.me/api/portraits/women/66.jpg",
        'quote': "The student visa guidance from Dream Edge was invaluable. My UK student visa was approved without any issues.",
        'program': "BA Media and Communications",
        'university': "King's College London, UK",
        'category': "Visa Guidance",
        'status': 'published',
    },
    {
        'name': "Nishant KC",
        'photo_url': "https://randomuser.me/api/portraits/men/22.jpg",
        'quote': "Dream Edge helped me secure a 50% scholarship at Cardiff University.",
        'program': "MSc Computer Science",
        'university': "Cardiff University, UK",
        'category': "Scholarship Guidance",
        'status': 'published',
    },
    {
        'name': "Suraj Thapa",
        'photo_url': "https://randomuser.me/api/portraits/men/67.jpg",
        'quote': "Thanks to Dream Edge, I'm now studying in Canada! Their guidance on the study permit application was thorough.",
        'program': "Diploma in Business Administration",
        'university': "Seneca College, Canada",
        'category': "Visa Guidance",
        'status': 'published',
    },
]

PROCESS_STEPS = [
    {
        'step_number': 1,
        'title': "Initial Consultation & Profile Assessment",
        'description': "We start with a detailed discussion to understand your academic background, career aspirations, financial standing, and preferred study destinations.",
        'icon_name': 'users',
    },
    {
        'step_number': 2,
        'title': "University & Course Selection",
        'description': "Based on your profile, we shortlist suitable universities and courses that match your goals.",
        'icon_name': 'search',
    },
    {
        'step_number': 3,
        'title': "Application Submission & Offer Acceptance",
        'description': "We assist in preparing and submitting applications, and help you choose the best offer.",
        'icon_name': 'file-check',
    },
    {
        'step_number': 4,
        'title': "Visa Guidance & Pre-Departure Support",
        'description': "Our experts provide student visa support, interview preparation and pre-departure briefings for your destination.",
        'icon_name': 'briefcase',
    },
]

TEST_PREP_COURSES = [
    {
        'test_name': "IELTS Academic",
        'slug': 'ielts-academic',
        'description': "Comprehensive preparation for the IELTS Academic test, covering Listening, Reading, Writing, and Speaking.",
        'duration': "8 weeks",
        'price': "NPR 15,000",
        'schedule_options': [
            "Weekday Evenings (6PM-8PM)",
            "Weekend Mornings (9AM-1PM)",
            "Intensive (Monday-Friday, 2PM-5PM)",
        ],
        'features': [
            "Expert instructors with 7+ years of experience",
            "Small batch sizes (max 12 students)",
            "5 full-length mock tests",
            "Personalized feedback on speaking and writing",
        ],
        'display_order': 1,
    },
    {
        'test_name': "TOEFL iBT",
        'slug': 'toefl-ibt',
        'description': "Structured preparation for the TOEFL iBT test, focusing on academic English skills required for university admission.",
        'duration': "6 weeks",
        'price': "NPR 16,500",
        'schedule_options': [
            "Weekday Evenings (6PM-8PM)",
            "Weekend Afternoons (2PM-6PM)",
        ],
        'features': [
            "Specialized instructors for each test section",
            "Computer-based practice tests",
            "Extensive vocabulary building",
        ],
        'display_order': 2,
    },
    {
        'test_name': "PTE Academic",
        'slug': 'pte-academic',
        'description': "Targeted preparation for the Pearson Test of English Academic, focusing on the computer-based format.",
        'duration': "5 weeks",
        'price': "NPR 17,000",
        'schedule_options': [
            "Weekday Mornings (10AM-12PM)",
            "Weekend Full Days (10AM-4PM)",
        ],
        'features': [
            "Familiarization with computer-based testing format",
            "AI-scored practice tests with detailed analytics",
            "Focus on time management strategies",
        ],
        'display_order': 3,
    },
    {
        'test_name': "English for Academic Purposes",
        'slug': 'english-academic-purposes',
        'description': "Foundation course for students who need to build their English language skills before taking standardized tests.",
        'duration': "12 weeks",
        'price': "NPR 22,000",
        'schedule_options': [
            "Flexible scheduling (10 hours per week)",
            "Customized one-on-one sessions",
        ],
        'features': [
            "Personalized learning plan",
            "Academic vocabulary development",
            "Essay writing and critical thinking",
        ],
        'display_order': 4,
    },
]

UNIVERSITIES = [
    {
        'name': "University of Oxford",
        'slug': 'university-of-oxford',
        'logo_url': "https://upload.wikimedia.org/wikipedia/commons/thumb/f/ff/Oxford-University-Circlet.svg/1200px-Oxford-University-Circlet.svg.png",
        'description': "The University of Oxford is the oldest university in the English-speaking world.",
        'ranking': 1,
        'location': "Oxford, United Kingdom",
        'website_url': "https://www.ox.ac.uk/",
        'tuition_fees_range': "£28,950 - £44,240 per year (international)",
        'popular_courses': ["Law", "Medicine", "PPE (Philosophy, Politics and Economics)", "Computer Science"],
        'accommodation_info': "Most Oxford students live in college accommodation for the first year.",
    },
    {
        'name': "University of Cambridge",
        'slug': 'university-of-cambridge',
        'logo_url': "https://upload.wikimedia.org/wikipedia/commons/thumb/7/7a/University_of_Cambridge_coat_of_arms_official.svg/1200px-University_of_Cambridge_coat_of_arms_official.svg.png",
        'description': "The University of Cambridge is one of the world's oldest universities and leading academic centers.",
        'ranking': 2,
        'location': "Cambridge, United Kingdom",
        'website_url': "https://www.cam.ac.uk/",
        'tuition_fees_range': "£25,734 - £67,194 per year (international)",
        'popular_courses': ["Mathematics", "Natural Sciences", "Engineering", "Law"],
        'accommodation_info': "Cambridge guarantees most undergraduate students college-owned accommodation for at least three years.",
    },
    {
        'name': "Imperial College London",
        'slug': 'imperial-college-london',
        'description': "Imperial College London is a global top ten university with a reputation for excellence in science, engineering, medicine and business.",
        'ranking': 8,
        'location': "London, United Kingdom",
        'website_url': "https://www.imperial.ac.uk/",
        'tuition_fees_range': "£35,100 - £37,900 per year (international for most programs)",
        'popular_courses': ["Engineering", "Medicine", "Computing & AI"],
        'accommodation_info': "Imperial guarantees accommodation for all first-year undergraduate students.",
    },
    {
        'name': "The University of Melbourne",
        'slug': 'university-of-melbourne',
        'description': "The University of Melbourne is Australia's second oldest university.",
        'ranking': 14,
        'location': "Melbourne, VIC, Australia",
        'website_url': "https://www.unimelb.edu.au/",
        'tuition_fees_range': "AUD $40,000 - AUD $55,000 per year (international)",
        'popular_courses': ["Medicine, Dentistry & Health Sciences", "Business & Economics", "Law"],
        'accommodation_info': "Offers residential colleges and university apartments.",
    },
    {
        'name': "University of Toronto",
        'slug': 'university-of-toronto',
        'description': "The University of Toronto is Canada's largest university and a global leader in research and teaching.",
        'ranking': 21,
        'location': "Toronto, ON, Canada",
        'website_url': "https://www.utoronto.ca/",
        'tuition_fees_range': "CAD $45,000 - CAD $70,000 per year (international)",
        'popular_courses': ["Computer Science & AI", "Engineering", "Commerce & Management"],
        'accommodation_info': "Various on-campus residence options are available across its three campuses.",
    },
]

SITE_SETTINGS = {
    'site_name': "Dream Edge",
    'primary_phone': "+977-1-4412345",
    'primary_email': "info@dreamedge.com.np",
    'primary_address_line1': "Putalisadak, Kathmandu",
    'primary_address_line2': "Nepal",
    'office_hours': "Sun - Fri, 10:00 AM - 6:00 PM",
    'facebook_url': "https://facebook.com/dreamedgenepal",
    'instagram_url': "https://instagram.com/dreamedgenepal",
    'linkedin_url': "https://linkedin.com/company/dreamedgenepal",
    'twitter_url': "https://twitter.com/dreamedge",
    'map_embed_url_main_office': "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3532.47!2d85.3169!3d27.7027!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1",
    'footer_about_text': "Dream Edge is Nepal's trusted overseas education consultancy, helping students study abroad in Europe, Australia, New Zealand, USA, Canada, UK & Japan.",
    'copyright_year_start': 2015,
    'hero_title': "Study Abroad from Nepal with Dream Edge",
    'hero_subtitle': "Your trusted overseas education consultancy. Expert study abroad guidance, university admissions, and student visa assistance.",
    'hero_cta_text': "Book a Free Consultation",
    'hero_cta_link': "/book-consultation/",
    'hero_background_image_url': "/static/images/hero-banner.jpg",
    'why_choose_us_title': "Why Choose Dream Edge?",
    'why_choose_us_subtitle': "Nepal's leading education consultancy for overseas studies.",
    'proven_process_title': "Our Proven Process to Study Abroad Success",
    'about_hero_title': "About Dream Edge - Nepal's Leading Education Consultancy",
    'about_hero_subtitle': "Empowering Nepali students to achieve their dream of studying abroad in top universities worldwide.",
    'about_us_story_title': "Our Story",
    'about_us_story_content': "Dream Edge was founded with a clear mission: to make quality international education accessible to deserving Nepali students.",
    'about_us_mission_title': "Our Mission",
    'about_us_mission_content': "To empower Nepali students with comprehensive guidance, resources, and support to access quality international education.",
    'about_us_vision_title': "Our Vision",
    'about_us_vision_content': "To be recognized as the most trusted name in international education consultancy in Nepal.",
    'about_us_image_url': "/static/images/about-office.jpg",
}

TIME_SLOTS = [
    "09:00 AM - 10:00 AM",
    "10:00 AM - 11:00 AM",
    "11:00 AM - 12:00 PM",
    "02:00 PM - 03:00 PM",
    "03:00 PM - 04:00 PM",
]

# (name, is_active)
EDUCATION_LEVELS = [
    ("SEE/O-Levels/High School Diploma", True),
    ("Plus 2/A-Levels/Associate Degree", True),
    ("Bachelor's Degree", True),
    ("Master's Degree", True),
    ("Doctoral Degree (PhD)", True),
    ("Other", False),
]

STUDY_INTERESTS = [
    ("Business & Management", True),
    ("Engineering & Technology", True),
    ("Health & Medicine", True),
    ("Arts & Humanities", True),
    ("Computer Science & IT", True),
    ("Social Sciences & Law", True),
    ("Pure & Applied Sciences", True),
    ("Architecture & Design", True),
    ("Hospitality & Tourism", True),
    ("Other", False),
]

DESTINATIONS = [
    {
        'country_slug': 'uk',
        'display_name': "United Kingdom",
        'meta_title': "Study in UK - World-Class Education from Nepal",
        'meta_description': "Explore prestigious UK universities and experience rich cultural heritage while studying abroad from Nepal.",
        'intro_text': "The United Kingdom is home to some of the world's oldest and most prestigious universities, with a strong academic tradition, diverse programs, and excellent research opportunities.",
        'why_study_here': [
            "World-renowned universities with global recognition",
            "Shorter degree programs (1-year Master's programs)",
            "Post-study work visa opportunities (2-3 years)",
            "English-speaking country with quality education system",
        ],
        'popular_courses': ["Business & Management", "Engineering & Technology", "Medicine & Healthcare", "Law & Social Sciences"],
        'admission_requirements': "Typically requires completion of A-levels or equivalent, IELTS 6.0-7.0 for undergraduate, and a bachelor's degree with 60%+ for postgraduate programs.",
        'visa_requirements': "A student visa requires a university admission offer, proof of funds, a tuberculosis test, and a valid passport.",
        'estimated_costs': "Tuition: £10,000-£38,000/year; Living expenses: £12,000-£15,000/year in London, £9,000-£12,000 elsewhere.",
        'work_opportunities': "Students can work up to 20 hours/week during term and full-time during holidays.",
        'quick_facts': {'Capital': 'London', 'Currency': 'GBP', 'Language': 'English'},
        'display_order': 1,
    },
    {
        'country_slug': 'usa',
        'display_name': "United States of America",
        'meta_title': "Study in USA - American Dream Education from Nepal",
        'meta_description': "Access world-leading universities and cutting-edge research opportunities in the land of innovation.",
        'intro_text': "The United States offers unparalleled opportunities for higher education with its flexible curriculum, diverse campus culture, and emphasis on research and innovation.",
        'why_study_here': [
            "Home to many of the world's top-ranked universities",
            "Flexible education system with diverse course options",
            "Optional Practical Training (OPT) work opportunities",
        ],
        'popular_courses': ["Computer Science & Engineering", "Business Administration (MBA)", "Data Science & Analytics"],
        'admission_requirements': "Requires high school diploma with good grades, SAT/ACT for undergrad, GRE/GMAT for postgrad, and TOEFL/IELTS.",
        'visa_requirements': "An F-1 student visa requires a university I-20 form, SEVIS fee payment, a visa interview, and proof of financial support.",
        'estimated_costs': "Tuition: $20,000-$70,000/year depending on institution; Living expenses: $10,000-$18,000/year.",
        'work_opportunities': "On-campus work up to 20 hours/week. OPT allows 12 months work, extendable to 36 months for STEM graduates.",
        'quick_facts': {'Capital': 'Washington, D.C.', 'Currency': 'USD', 'Language': 'English'},
        'display_order': 2,
    },
    {
        'country_slug': 'canada',
        'display_name': "Canada",
        'meta_title': "Study in Canada - Quality Education & Immigration Pathways",
        'meta_description': "Experience affordable world-class education with excellent post-study work and immigration opportunities.",
        'intro_text': "Canada offers high-quality education at affordable costs, a welcoming multicultural society, and excellent immigration pathways.",
        'why_study_here': [
            "Affordable tuition fees compared to USA/UK",
            "Excellent post-graduation work permit (up to 3 years)",
            "Clear pathways to permanent residency",
        ],
        'popular_courses': ["Computer Science & IT", "Business & Management", "Healthcare & Nursing"],
        'admission_requirements': "High school completion with 60%+, IELTS 6.0-6.5 for diploma/undergraduate, bachelor's degree with 60%+ for postgraduate.",
        'visa_requirements': "A study permit requires a university acceptance letter, proof of funds, a medical exam, and a valid passport.",
        'estimated_costs': "Tuition: CAD $15,000-$35,000/year; Living expenses: CAD $10,000-$15,000/year.",
        'work_opportunities': "Work up to 20 hours/week during studies, full-time during breaks.",
        'quick_facts': {'Capital': 'Ottawa', 'Currency': 'CAD', 'Language': 'English, French'},
        'display_order': 3,
    },
]


def _html_list(items):
    return '<ul>' + ''.join(f'<li>{escape(item)}</li>' for item in items) + '</ul>'


def _html_paragraph(text):
    return f'<p>{escape(text)}</p>'


def destination_defaults(entry):
    """Map the flat seed entry onto the destination page columns."""
    return {
        'display_name': entry['display_name'],
        'meta_title': entry['meta_title'],
        'meta_description': entry['meta_description'],
        'intro_text': entry['intro_text'],
        'quick_facts': entry['quick_facts'],
        'why_study_here_content': _html_list(entry['why_study_here']),
        'popular_courses_content': _html_list(entry['popular_courses']),
        'admission_requirements_content': _html_paragraph(entry['admission_requirements']),
        'visa_requirements_content': _html_paragraph(entry['visa_requirements']),
        'cost_studying_living_content': _html_paragraph(entry['estimated_costs']),
        'additional_sections': [
            {'title': 'Work Opportunities', 'content': _html_paragraph(entry['work_opportunities'])},
        ],
        'sidebar_nav_links': [
            {'label': title, 'anchor': anchor}
            for anchor, title, _field in StudyDestination.CONTENT_SECTIONS
        ],
        'is_active': True,
        'display_order': entry['display_order'],
    }


def _upsert(model, key, rows):
    for row in rows:
        row = dict(row)
        lookup = {key: row.pop(key)}
        model.objects.update_or_create(defaults=row, **lookup)
    logger.info("Upserted %d rows into %s", len(rows), model._meta.db_table)


def seed_faqs():
    _upsert(FAQ, 'question', FAQS)


def seed_services():
    _upsert(Service, 'slug', SERVICES)


def seed_testimonials():
    _upsert(Testimonial, 'name', TESTIMONIALS)


def seed_test_prep_courses():
    _upsert(TestPrepCourse, 'slug', TEST_PREP_COURSES)


def seed_universities():
    _upsert(University, 'slug', UNIVERSITIES)


def seed_site_settings():
    SiteSettings.objects.update_or_create(pk=SiteSettings.SINGLETON_ID, defaults=SITE_SETTINGS)
    logger.info("Upserted site settings")


def seed_form_options():
    _upsert(ConsultationTimeSlot, 'time_range_display', [
        {'time_range_display': slot, 'is_active': True, 'display_order': i}
        for i, slot in enumerate(TIME_SLOTS, start=1)
    ])
    _upsert(EducationLevelOption, 'level_name', [
        {'level_name': name, 'is_active': active, 'display_order': i}
        for i, (name, active) in enumerate(EDUCATION_LEVELS, start=1)
    ])
    _upsert(StudyInterestOption, 'interest_name', [
        {'interest_name': name, 'is_active': active, 'display_order': i}
        for i, (name, active) in enumerate(STUDY_INTERESTS, start=1)
    ])


def seed_process_steps():
    _upsert(HomepageProcessStep, 'step_number', PROCESS_STEPS)


def seed_study_destinations():
    for entry in DESTINATIONS:
        StudyDestination.objects.update_or_create(
            country_slug=entry['country_slug'],
            defaults=destination_defaults(entry),
        )
    logger.info("Upserted %d study destinations", len(DESTINATIONS))


SEEDERS = [
    seed_faqs,
    seed_services,
    seed_testimonials,
    seed_test_prep_courses,
    seed_universities,
    seed_site_settings,
    seed_form_options,
    seed_process_steps,
    seed_study_destinations,
]


def run_seed():
    """Run every seeder; a failing one is logged and the rest still run."""
    logger.info("Starting database seeding")
    all_successful = True

    for seeder in SEEDERS:
        try:
            with transaction.atomic():
                seeder()
        except DatabaseError as exc:
            logger.error("Seeder %s failed: %s", seeder.__name__, exc)
            all_successful = False

    if all_successful:
        logger.info("Database seeding completed")
        return {'success': True, 'message': 'Database seeded successfully.'}

    logger.error("Database seeding failed")
    return {'success': False, 'message': 'Failed to seed database.'}
