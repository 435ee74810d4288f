from django.urls import path
from .views import (
    ProjectList, ProjectDetail,
    ResumeList, ResumeDetail,
    AdminLoginView
)

urlpatterns = [
    path('projects', ProjectList.as_view(), name='project-list'),
    path('projects/<str:pk>', ProjectDetail.as_view(), name='project-detail'),

    path('resume', ResumeList.as_view(), name='resume-list'),
    path('resume/<str:pk>', ResumeDetail.as_view(), name='resume-detail'),

    path('admin/login', AdminLoginView.as_view(), name='admin-login'),
]
