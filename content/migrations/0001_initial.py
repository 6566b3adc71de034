import uuid

from django.db import migrations, models


def timestamps():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


def uuid_pk():
    return ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False))


def lookup_fields(label_field, max_length):
    return [
        uuid_pk(),
        *timestamps(),
        ('is_active', models.BooleanField(default=True)),
        ('display_order', models.IntegerField(blank=True, null=True)),
        (label_field, models.CharField(max_length=max_length, unique=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Service',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=200, unique=True)),
                ('short_description', models.TextField(blank=True, help_text='Short description for the card')),
                ('full_description', models.TextField(blank=True)),
                ('icon_name', models.CharField(blank=True, help_text="Icon key, e.g. 'academic-cap'", max_length=50)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('benefits', models.JSONField(blank=True, default=list)),
                ('display_order', models.IntegerField(blank=True, help_text='Order to display on the site', null=True)),
            ],
            options={'db_table': 'services', 'ordering': ['display_order', 'name']},
        ),
        migrations.CreateModel(
            name='University',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=200, unique=True)),
                ('description', models.TextField(blank=True)),
                ('location', models.CharField(blank=True, max_length=200)),
                ('ranking', models.PositiveIntegerField(blank=True, null=True)),
                ('tuition_fees_range', models.CharField(blank=True, max_length=200)),
                ('website_url', models.URLField(blank=True, max_length=500)),
                ('logo_url', models.URLField(blank=True, max_length=500, null=True)),
                ('banner_image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('popular_courses', models.JSONField(blank=True, default=list)),
                ('accommodation_info', models.TextField(blank=True)),
            ],
            options={'db_table': 'universities', 'verbose_name_plural': 'universities', 'ordering': ['ranking', 'name']},
        ),
        migrations.CreateModel(
            name='Testimonial',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('name', models.CharField(max_length=100)),
                ('quote', models.TextField()),
                ('photo_url', models.URLField(blank=True, max_length=500, null=True)),
                ('university', models.CharField(blank=True, max_length=200)),
                ('program', models.CharField(blank=True, max_length=200)),
                ('category', models.CharField(blank=True, max_length=100)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published'), ('archived', 'Archived')], default='draft', max_length=10)),
            ],
            options={'db_table': 'testimonials', 'ordering': ['-created_at']},
        ),
        migrations.CreateModel(
            name='FAQ',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('question', models.CharField(max_length=300)),
                ('answer', models.TextField()),
                ('category', models.CharField(blank=True, choices=[('general', 'General'), ('application', 'Application'), ('visa', 'Visa'), ('accommodation', 'Accommodation'), ('test_preparation', 'Test Preparation')], max_length=50)),
                ('country', models.CharField(default='general', help_text="Country slug, or 'general' for every country", max_length=50)),
                ('display_order', models.IntegerField(blank=True, null=True)),
            ],
            options={'db_table': 'faqs', 'verbose_name': 'FAQ', 'verbose_name_plural': 'FAQs', 'ordering': ['display_order', 'question']},
        ),
        migrations.CreateModel(
            name='TestPrepCourse',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('test_name', models.CharField(max_length=100)),
                ('slug', models.SlugField(max_length=100, unique=True)),
                ('description', models.TextField(blank=True)),
                ('duration', models.CharField(blank=True, max_length=100)),
                ('price', models.CharField(blank=True, max_length=100)),
                ('features', models.JSONField(blank=True, default=list)),
                ('schedule_options', models.JSONField(blank=True, default=list)),
                ('display_order', models.IntegerField(blank=True, null=True)),
            ],
            options={'db_table': 'test_prep_courses', 'ordering': ['display_order', 'test_name']},
        ),
        migrations.CreateModel(
            name='StudyDestination',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('country_slug', models.SlugField(max_length=50, unique=True)),
                ('display_name', models.CharField(max_length=100)),
                ('meta_title', models.CharField(blank=True, max_length=200)),
                ('meta_description', models.TextField(blank=True)),
                ('seo_keywords', models.TextField(blank=True)),
                ('hero_image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('intro_text', models.TextField(blank=True)),
                ('quick_facts', models.JSONField(blank=True, default=dict)),
                ('why_study_here_content', models.TextField(blank=True)),
                ('education_system_content', models.TextField(blank=True)),
                ('popular_courses_content', models.TextField(blank=True)),
                ('admission_requirements_content', models.TextField(blank=True)),
                ('cost_studying_living_content', models.TextField(blank=True)),
                ('visa_requirements_content', models.TextField(blank=True)),
                ('scholarships_content', models.TextField(blank=True)),
                ('country_specific_faqs', models.JSONField(blank=True, default=list)),
                ('additional_sections', models.JSONField(blank=True, default=list)),
                ('sidebar_nav_links', models.JSONField(blank=True, default=list)),
                ('is_active', models.BooleanField(default=True)),
                ('display_order', models.IntegerField(blank=True, null=True)),
            ],
            options={'db_table': 'study_destination_details', 'ordering': ['display_order', 'display_name']},
        ),
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('site_name', models.CharField(blank=True, max_length=100)),
                ('primary_phone', models.CharField(blank=True, max_length=50)),
                ('primary_email', models.EmailField(blank=True, max_length=254)),
                ('primary_address_line1', models.CharField(blank=True, max_length=200)),
                ('primary_address_line2', models.CharField(blank=True, max_length=200)),
                ('office_hours', models.CharField(blank=True, max_length=200)),
                ('facebook_url', models.URLField(blank=True, max_length=300)),
                ('instagram_url', models.URLField(blank=True, max_length=300)),
                ('linkedin_url', models.URLField(blank=True, max_length=300)),
                ('twitter_url', models.URLField(blank=True, max_length=300)),
                ('map_embed_url_main_office', models.URLField(blank=True, max_length=1000)),
                ('footer_about_text', models.TextField(blank=True)),
                ('copyright_year_start', models.PositiveIntegerField(blank=True, null=True)),
                ('hero_title', models.CharField(blank=True, max_length=200)),
                ('hero_subtitle', models.TextField(blank=True)),
                ('hero_cta_text', models.CharField(blank=True, max_length=100)),
                ('hero_cta_link', models.CharField(blank=True, max_length=200)),
                ('hero_background_image_url', models.CharField(blank=True, max_length=500)),
                ('why_choose_us_title', models.CharField(blank=True, max_length=200)),
                ('why_choose_us_subtitle', models.TextField(blank=True)),
                ('proven_process_title', models.CharField(blank=True, max_length=200)),
                ('about_hero_title', models.CharField(blank=True, max_length=200)),
                ('about_hero_subtitle', models.TextField(blank=True)),
                ('about_us_story_title', models.CharField(blank=True, max_length=200)),
                ('about_us_story_content', models.TextField(blank=True)),
                ('about_us_mission_title', models.CharField(blank=True, max_length=200)),
                ('about_us_mission_content', models.TextField(blank=True)),
                ('about_us_vision_title', models.CharField(blank=True, max_length=200)),
                ('about_us_vision_content', models.TextField(blank=True)),
                ('about_us_image_url', models.CharField(blank=True, max_length=500)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={'db_table': 'site_settings', 'verbose_name_plural': 'site settings'},
        ),
        migrations.CreateModel(
            name='HomepageProcessStep',
            fields=[
                uuid_pk(),
                *timestamps(),
                ('step_number', models.PositiveIntegerField(unique=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('icon_name', models.CharField(blank=True, max_length=50)),
            ],
            options={'db_table': 'homepage_process_steps', 'ordering': ['step_number']},
        ),
        migrations.CreateModel(
            name='ConsultationTimeSlot',
            fields=lookup_fields('time_range_display', 100),
            options={'db_table': 'consultation_time_slots', 'ordering': ['display_order', 'time_range_display']},
        ),
        migrations.CreateModel(
            name='EducationLevelOption',
            fields=lookup_fields('level_name', 150),
            options={'db_table': 'education_levels_options', 'ordering': ['display_order', 'level_name']},
        ),
        migrations.CreateModel(
            name='StudyInterestOption',
            fields=lookup_fields('interest_name', 150),
            options={'db_table': 'study_interests_options', 'ordering': ['display_order', 'interest_name']},
        ),
    ]
