from django.urls import include
from django.urls import re_path

urlpatterns = [
    re_path(r'^', include('group_importer.urls')),
]
