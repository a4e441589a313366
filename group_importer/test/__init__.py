from group_importer.models import Course, User, Enrollment


def create_course(short_name='TRAIN 101', full_name='Training 101',
                  idnumber=''):
    course = Course(short_name=short_name, full_name=full_name,
                    idnumber=idnumber)
    course.save()
    return course


def create_user(username, idnumber='', is_deleted=False):
    user = User(username=username, idnumber=idnumber,
                first_name=username.capitalize(), last_name='Average',
                is_deleted=is_deleted)
    user.save()
    return user


def enroll(course, user, is_active=True):
    enrollment = Enrollment(course=course, user=user, is_active=is_active)
    enrollment.save()
    return enrollment
