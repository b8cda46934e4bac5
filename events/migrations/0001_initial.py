import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Display name of the event. Include the year if applicable.', max_length=200, unique=True)),
                ('slug', models.SlugField(help_text='Event slug. Name used in URLs and on the command line.', max_length=100, unique=True)),
                ('year', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(2000), django.core.validators.MaxValueValidator(2100)], verbose_name='Event year')),
                ('location', models.CharField(blank=True, default='', help_text='Venue or city where the event takes place', max_length=200)),
                ('start_date', models.DateField(blank=True, help_text='First day of the event', null=True)),
                ('end_date', models.DateField(blank=True, help_text='Last day of the event', null=True)),
                ('description', models.TextField(blank=True, default='', help_text='Short description of the event')),
                ('is_active', models.BooleanField(default=True, help_text='Whether this event is currently active and visible on the site')),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['name'],
                'constraints': [models.CheckConstraint(condition=models.Q(('end_date__gte', models.F('start_date')), ('start_date__isnull', True), ('end_date__isnull', True), _connector='OR'), name='event_start_before_end')],
            },
        ),
        migrations.CreateModel(
            name='Speaker',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(help_text='Full name of the speaker', max_length=200)),
                ('credentials', models.CharField(blank=True, default='', help_text='Academic or professional credentials (e.g., MD, PhD, PA-C)', max_length=200)),
                ('bio', models.TextField(blank=True, default='', help_text='Biography of the speaker')),
                ('specialty', models.CharField(blank=True, default='', help_text='Professional specialty', max_length=200)),
                ('institution', models.CharField(blank=True, default='', help_text='Institution or affiliation', max_length=200)),
                ('photo_url', models.URLField(blank=True, default='', help_text="URL to the speaker's photo")),
                ('email', models.EmailField(blank=True, default='', help_text='Contact e-mail of the speaker', max_length=254)),
                ('linkedin_url', models.URLField(blank=True, default='', help_text='LinkedIn profile URL')),
                ('website_url', models.URLField(blank=True, default='', help_text='Personal or institutional website')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(help_text='Event this speaker belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='speakers', to='events.event')),
            ],
            options={
                'verbose_name': 'Speaker',
                'verbose_name_plural': 'Speakers',
                'ordering': ['full_name'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('email', ''), _negated=True), fields=('event', 'email'), name='unique_speaker_email_per_event')],
            },
        ),
        migrations.CreateModel(
            name='Session',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(help_text='Title of the session', max_length=250)),
                ('description', models.TextField(blank=True, default='', help_text='Session description')),
                ('session_type', models.CharField(choices=[('keynote', 'Keynote'), ('presentation', 'Presentation'), ('workshop', 'Workshop'), ('panel', 'Panel Discussion'), ('symposium', 'Symposium'), ('breakout', 'Breakout Session'), ('networking', 'Networking'), ('meal', 'Meal Break'), ('break', 'Break'), ('registration', 'Registration'), ('other', 'Other')], default='presentation', help_text='Type of the session', max_length=50)),
                ('session_date', models.DateField(help_text='Day on which the session takes place')),
                ('start_time', models.TimeField(help_text='Local start time')),
                ('end_time', models.TimeField(help_text='Local end time')),
                ('location', models.CharField(blank=True, default='', help_text='Room or location of the session', max_length=200)),
                ('track', models.CharField(blank=True, default='', help_text='Track or category of the session', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(help_text='Event this session belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='sessions', to='events.event')),
            ],
            options={
                'verbose_name': 'Session',
                'verbose_name_plural': 'Sessions',
                'ordering': ['session_date', 'start_time'],
            },
        ),
        migrations.CreateModel(
            name='SessionSpeaker',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('speaker', 'Speaker'), ('moderator', 'Moderator'), ('panelist', 'Panelist'), ('chair', 'Chair'), ('co-chair', 'Co-Chair')], default='speaker', max_length=50)),
                ('display_order', models.PositiveIntegerField(default=0, help_text='Position of the speaker when the session is displayed')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='speaker_assignments', to='events.session')),
                ('speaker', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='session_assignments', to='events.speaker')),
            ],
            options={
                'verbose_name': 'Session speaker',
                'verbose_name_plural': 'Session speakers',
                'ordering': ['session', 'display_order'],
                'constraints': [models.UniqueConstraint(fields=('session', 'speaker'), name='unique_speaker_per_session')],
            },
        ),
        migrations.AddField(
            model_name='session',
            name='speakers',
            field=models.ManyToManyField(help_text='Speakers taking part in this session', related_name='sessions', through='events.SessionSpeaker', to='events.speaker'),
        ),
        migrations.AddConstraint(
            model_name='session',
            constraint=models.UniqueConstraint(fields=('event', 'title', 'session_date', 'start_time'), name='unique_session_slot_per_event'),
        ),
        migrations.AddConstraint(
            model_name='session',
            constraint=models.CheckConstraint(condition=models.Q(('start_time__lte', models.F('end_time'))), name='session_start_before_end'),
        ),
        migrations.CreateModel(
            name='Exhibitor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('company_name', models.CharField(help_text='Name of the exhibiting company', max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('booth_number', models.CharField(blank=True, default='', max_length=50)),
                ('logo_url', models.URLField(blank=True, default='')),
                ('banner_url', models.URLField(blank=True, default='')),
                ('website_url', models.URLField(blank=True, default='')),
                ('contact_name', models.CharField(blank=True, default='', max_length=200)),
                ('contact_email', models.EmailField(blank=True, default='', max_length=254)),
                ('contact_phone', models.CharField(blank=True, default='', max_length=50)),
                ('category', models.CharField(blank=True, default='', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='exhibitors', to='events.event')),
            ],
            options={
                'verbose_name': 'Exhibitor',
                'verbose_name_plural': 'Exhibitors',
                'ordering': ['company_name'],
                'constraints': [models.UniqueConstraint(fields=('event', 'company_name'), name='unique_exhibitor_per_event')],
            },
        ),
        migrations.CreateModel(
            name='Sponsor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('company_name', models.CharField(help_text='Name of the sponsoring company', max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('tier', models.CharField(choices=[('platinum', 'Platinum'), ('gold', 'Gold'), ('silver', 'Silver'), ('bronze', 'Bronze'), ('partner', 'Partner')], default='partner', max_length=50)),
                ('logo_url', models.URLField(blank=True, default='')),
                ('banner_url', models.URLField(blank=True, default='')),
                ('website_url', models.URLField(blank=True, default='')),
                ('contact_name', models.CharField(blank=True, default='', max_length=200)),
                ('contact_email', models.EmailField(blank=True, default='', max_length=254)),
                ('booth_number', models.CharField(blank=True, default='', max_length=50)),
                ('display_order', models.PositiveIntegerField(default=0)),
                ('is_featured', models.BooleanField(default=False, help_text='Featured sponsors are highlighted in the attendee app')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sponsors', to='events.event')),
            ],
            options={
                'verbose_name': 'Sponsor',
                'verbose_name_plural': 'Sponsors',
                'ordering': ['display_order', 'company_name'],
                'constraints': [models.UniqueConstraint(fields=('event', 'company_name'), name='unique_sponsor_per_event')],
            },
        ),
        migrations.CreateModel(
            name='AttendeeGroup',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name of the group', max_length=100)),
                ('description', models.TextField(blank=True, default='')),
                ('color', models.CharField(blank=True, default='#3b82f6', help_text='Badge colour used to display the group', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendee_groups', to='events.event')),
            ],
            options={
                'verbose_name': 'Attendee group',
                'verbose_name_plural': 'Attendee groups',
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(fields=('event', 'name'), name='unique_group_name_per_event')],
            },
        ),
        migrations.CreateModel(
            name='Attendee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('first_name', models.CharField(max_length=200)),
                ('last_name', models.CharField(blank=True, default='', max_length=200)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(blank=True, default='', max_length=50)),
                ('specialty', models.CharField(blank=True, default='', max_length=200)),
                ('institution', models.CharField(blank=True, default='', max_length=200)),
                ('title', models.CharField(blank=True, default='', max_length=200)),
                ('badge_type', models.CharField(default='attendee', help_text='Badge printed for the attendee (e.g., attendee, vip, press)', max_length=50)),
                ('qr_data', models.JSONField(blank=True, help_text='Payload encoded in the badge QR code', null=True)),
                ('checked_in', models.BooleanField(default=False)),
                ('checked_in_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendees', to='events.event')),
            ],
            options={
                'verbose_name': 'Attendee',
                'verbose_name_plural': 'Attendees',
                'ordering': ['last_name', 'first_name'],
                'constraints': [models.UniqueConstraint(fields=('event', 'email'), name='unique_attendee_email_per_event')],
            },
        ),
        migrations.CreateModel(
            name='AttendeeGroupMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('attendee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='events.attendee')),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='events.attendeegroup')),
            ],
            options={
                'verbose_name': 'Attendee group member',
                'verbose_name_plural': 'Attendee group members',
                'constraints': [models.UniqueConstraint(fields=('group', 'attendee'), name='unique_attendee_per_group')],
            },
        ),
        migrations.AddField(
            model_name='attendee',
            name='groups',
            field=models.ManyToManyField(related_name='members', through='events.AttendeeGroupMember', to='events.attendeegroup'),
        ),
    ]
