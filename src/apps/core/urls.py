"""Core app URL configuration."""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    # Public pages
    path("", views.IndexView.as_view(), name="index"),
    path("about/", views.AboutView.as_view(), name="about"),
    path("services/", views.ServicesView.as_view(), name="services"),
    path("services/<slug:slug>/", views.ServiceDetailView.as_view(), name="service_detail"),
    path("projects/", views.ProjectsView.as_view(), name="projects"),
    path("projects/<slug:slug>/", views.ProjectDetailView.as_view(), name="project_detail"),
    path("contact/", views.ContactView.as_view(), name="contact"),
    path("contact/submit/", views.ContactSubmitView.as_view(), name="contact_submit"),
    path("robots.txt", views.RobotsTxtView.as_view(), name="robots_txt"),
    # Loading overlay
    path("loader-seen/", views.LoaderSeenView.as_view(), name="loader_seen"),
    # Content studio
    path("studio/", views.StudioRedirectView.as_view(), name="studio"),
]
