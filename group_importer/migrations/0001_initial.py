from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Course',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('short_name', models.CharField(max_length=255, unique=True)),
                ('full_name', models.CharField(max_length=255)),
                ('idnumber', models.CharField(blank=True, default='', max_length=100)),
                ('added_date', models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('username', models.CharField(max_length=100, unique=True)),
                ('idnumber', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('first_name', models.CharField(blank=True, default='', max_length=100)),
                ('last_name', models.CharField(blank=True, default='', max_length=100)),
                ('email', models.CharField(blank=True, default='', max_length=100)),
                ('is_deleted', models.BooleanField(default=False)),
            ],
        ),
        migrations.CreateModel(
            name='Enrollment',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_active', models.BooleanField(default=True)),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.course')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.user')),
            ],
            options={
                'unique_together': {('course', 'user')},
            },
        ),
        migrations.CreateModel(
            name='Import',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('csv_type', models.SlugField(choices=[('group', 'Group'), ('grouping', 'Grouping')], max_length=20)),
                ('added_by', models.CharField(max_length=100)),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('delimiter', models.CharField(max_length=20, null=True)),
                ('encoding', models.CharField(max_length=40, null=True)),
                ('row_count', models.IntegerField(default=0)),
                ('results', models.TextField(null=True)),
                ('csv_errors', models.TextField(null=True)),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.course')),
            ],
        ),
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=254)),
                ('idnumber', models.CharField(blank=True, default='', max_length=100)),
                ('description', models.TextField(blank=True, default='')),
                ('enrolment_key', models.CharField(blank=True, default='', max_length=50)),
                ('enable_messaging', models.BooleanField(default=False)),
                ('picture', models.IntegerField(default=0)),
                ('hide_picture', models.BooleanField(default=False)),
                ('added_by', models.CharField(blank=True, default='', max_length=100)),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.course')),
            ],
            options={
                'unique_together': {('course', 'name')},
            },
        ),
        migrations.AddConstraint(
            model_name='group',
            constraint=models.UniqueConstraint(condition=models.Q(('idnumber', ''), _negated=True), fields=('course', 'idnumber'), name='unique_course_group_idnumber'),
        ),
        migrations.CreateModel(
            name='GroupMember',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.group')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.user')),
            ],
            options={
                'unique_together': {('group', 'user')},
            },
        ),
        migrations.CreateModel(
            name='Grouping',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.course')),
            ],
            options={
                'unique_together': {('course', 'name')},
            },
        ),
        migrations.CreateModel(
            name='GroupingGroup',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('added_date', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.group')),
                ('grouping', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='group_importer.grouping')),
            ],
            options={
                'unique_together': {('grouping', 'group')},
            },
        ),
        migrations.AddField(
            model_name='grouping',
            name='groups',
            field=models.ManyToManyField(related_name='groupings', through='group_importer.GroupingGroup', to='group_importer.group'),
        ),
    ]
