import uuid

from django.db import models


class TimestampedModel(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Service(TimestampedModel):
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    short_description = models.TextField(blank=True, help_text="Short description for the card")
    full_description = models.TextField(blank=True)
    icon_name = models.CharField(max_length=50, blank=True, help_text="Icon key, e.g. 'academic-cap'")
    image_url = models.URLField(max_length=500, null=True, blank=True)
    benefits = models.JSONField(default=list, blank=True)
    display_order = models.IntegerField(null=True, blank=True, help_text="Order to display on the site")

    class Meta:
        db_table = 'services'
        ordering = ['display_order', 'name']

    def __str__(self):
        return self.name


class University(TimestampedModel):
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    ranking = models.PositiveIntegerField(null=True, blank=True)
    tuition_fees_range = models.CharField(max_length=200, blank=True)
    website_url = models.URLField(max_length=500, blank=True)
    logo_url = models.URLField(max_length=500, null=True, blank=True)
    banner_image_url = models.URLField(max_length=500, null=True, blank=True)
    popular_courses = models.JSONField(default=list, blank=True)
    accommodation_info = models.TextField(blank=True)

    class Meta:
        db_table = 'universities'
        verbose_name_plural = 'universities'
        ordering = ['ranking', 'name']

    def __str__(self):
        return self.name


class Testimonial(TimestampedModel):
    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('published', 'Published'),
        ('archived', 'Archived'),
    ]

    name = models.CharField(max_length=100)
    quote = models.TextField()
    photo_url = models.URLField(max_length=500, null=True, blank=True)
    university = models.CharField(max_length=200, blank=True)
    program = models.CharField(max_length=200, blank=True)
    category = models.CharField(max_length=100, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='draft')

    class Meta:
        db_table = 'testimonials'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class FAQ(TimestampedModel):
    CATEGORY_CHOICES = [
        ('general', 'General'),
        ('application', 'Application'),
        ('visa', 'Visa'),
        ('accommodation', 'Accommodation'),
        ('test_preparation', 'Test Preparation'),
    ]

    question = models.CharField(max_length=300)
    answer = models.TextField()
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES, blank=True)
    country = models.CharField(max_length=50, default='general', help_text="Country slug, or 'general' for every country")
    display_order = models.IntegerField(null=True, blank=True)

    class Meta:
        db_table = 'faqs'
        verbose_name = 'FAQ'
        verbose_name_plural = 'FAQs'
        ordering = ['display_order', 'question']

    def __str__(self):
        return self.question


class TestPrepCourse(TimestampedModel):
    test_name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    duration = models.CharField(max_length=100, blank=True)
    price = models.CharField(max_length=100, blank=True)
    features = models.JSONField(default=list, blank=True)
    schedule_options = models.JSONField(default=list, blank=True)
    display_order = models.IntegerField(null=True, blank=True)

    class Meta:
        db_table = 'test_prep_courses'
        ordering = ['display_order', 'test_name']

    def __str__(self):
        return self.test_name


class StudyDestination(TimestampedModel):
    """Long-form page content for one study-abroad country."""

    country_slug = models.SlugField(max_length=50, unique=True)
    display_name = models.CharField(max_length=100)
    meta_title = models.CharField(max_length=200, blank=True)
    meta_description = models.TextField(blank=True)
    seo_keywords = models.TextField(blank=True)
    hero_image_url = models.URLField(max_length=500, null=True, blank=True)
    intro_text = models.TextField(blank=True)
    quick_facts = models.JSONField(default=dict, blank=True)

    # HTML content sections
    why_study_here_content = models.TextField(blank=True)
    education_system_content = models.TextField(blank=True)
    popular_courses_content = models.TextField(blank=True)
    admission_requirements_content = models.TextField(blank=True)
    cost_studying_living_content = models.TextField(blank=True)
    visa_requirements_content = models.TextField(blank=True)
    scholarships_content = models.TextField(blank=True)

    country_specific_faqs = models.JSONField(default=list, blank=True)
    additional_sections = models.JSONField(default=list, blank=True)
    sidebar_nav_links = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    display_order = models.IntegerField(null=True, blank=True)

    CONTENT_SECTIONS = [
        ('why-study', 'Why Study Here', 'why_study_here_content'),
        ('education-system', 'Education System', 'education_system_content'),
        ('popular-courses', 'Popular Courses', 'popular_courses_content'),
        ('admission-requirements', 'Admission Requirements', 'admission_requirements_content'),
        ('costs', 'Cost of Studying & Living', 'cost_studying_living_content'),
        ('visa', 'Visa Requirements', 'visa_requirements_content'),
        ('scholarships', 'Scholarships', 'scholarships_content'),
    ]

    class Meta:
        db_table = 'study_destination_details'
        ordering = ['display_order', 'display_name']

    def __str__(self):
        return self.display_name

    @property
    def content_sections(self):
        """(anchor, title, html) for each filled-in section, in page order."""
        return [
            (anchor, title, getattr(self, field))
            for anchor, title, field in self.CONTENT_SECTIONS
            if getattr(self, field)
        ]


class SiteSettings(models.Model):
    """Global site text. There is only ever one row, id=1."""

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    site_name = models.CharField(max_length=100, blank=True)
    primary_phone = models.CharField(max_length=50, blank=True)
    primary_email = models.EmailField(blank=True)
    primary_address_line1 = models.CharField(max_length=200, blank=True)
    primary_address_line2 = models.CharField(max_length=200, blank=True)
    office_hours = models.CharField(max_length=200, blank=True)
    facebook_url = models.URLField(max_length=300, blank=True)
    instagram_url = models.URLField(max_length=300, blank=True)
    linkedin_url = models.URLField(max_length=300, blank=True)
    twitter_url = models.URLField(max_length=300, blank=True)
    map_embed_url_main_office = models.URLField(max_length=1000, blank=True)
    footer_about_text = models.TextField(blank=True)
    copyright_year_start = models.PositiveIntegerField(null=True, blank=True)

    hero_title = models.CharField(max_length=200, blank=True)
    hero_subtitle = models.TextField(blank=True)
    hero_cta_text = models.CharField(max_length=100, blank=True)
    hero_cta_link = models.CharField(max_length=200, blank=True)
    hero_background_image_url = models.CharField(max_length=500, blank=True)
    why_choose_us_title = models.CharField(max_length=200, blank=True)
    why_choose_us_subtitle = models.TextField(blank=True)
    proven_process_title = models.CharField(max_length=200, blank=True)

    about_hero_title = models.CharField(max_length=200, blank=True)
    about_hero_subtitle = models.TextField(blank=True)
    about_us_story_title = models.CharField(max_length=200, blank=True)
    about_us_story_content = models.TextField(blank=True)
    about_us_mission_title = models.CharField(max_length=200, blank=True)
    about_us_mission_content = models.TextField(blank=True)
    about_us_vision_title = models.CharField(max_length=200, blank=True)
    about_us_vision_content = models.TextField(blank=True)
    about_us_image_url = models.CharField(max_length=500, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'site_settings'
        verbose_name_plural = 'site settings'

    def __str__(self):
        return self.site_name or 'Site settings'

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_ID
        super().save(*args, **kwargs)


class HomepageProcessStep(TimestampedModel):
    step_number = models.PositiveIntegerField(unique=True)
    title = models.CharField(max_length=200)
    description = models.TextField()
    icon_name = models.CharField(max_length=50, blank=True)

    class Meta:
        db_table = 'homepage_process_steps'
        ordering = ['step_number']

    def __str__(self):
        return f"{self.step_number}. {self.title}"


class LookupOption(TimestampedModel):
    """Base for the small option tables that feed the booking form dropdowns."""

    is_active = models.BooleanField(default=True)
    display_order = models.IntegerField(null=True, blank=True)

    label_field = None

    class Meta:
        abstract = True

    def __str__(self):
        return getattr(self, self.label_field)

    @property
    def label(self):
        return getattr(self, self.label_field)


class ConsultationTimeSlot(LookupOption):
    time_range_display = models.CharField(max_length=100, unique=True)

    label_field = 'time_range_display'

    class Meta:
        db_table = 'consultation_time_slots'
        ordering = ['display_order', 'time_range_display']


class EducationLevelOption(LookupOption):
    level_name = models.CharField(max_length=150, unique=True)

    label_field = 'level_name'

    class Meta:
        db_table = 'education_levels_options'
        ordering = ['display_order', 'level_name']


class StudyInterestOption(LookupOption):
    interest_name = models.CharField(max_length=150, unique=True)

    label_field = 'interest_name'

    class Meta:
        db_table = 'study_interests_options'
        ordering = ['display_order', 'interest_name']
