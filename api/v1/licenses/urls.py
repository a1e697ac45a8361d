"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses"

urlpatterns = [
    path("create-license", views.CreateLicenseView.as_view(), name="create-license"),
    path("validate-license", views.ValidateLicenseView.as_view(), name="validate-license"),
    path("validate-token", views.ValidateTokenView.as_view(), name="validate-token"),
    path("refresh-token", views.RefreshTokenView.as_view(), name="refresh-token"),
    path("update-license", views.UpdateLicenseView.as_view(), name="update-license"),
    path("delete-license", views.DeleteLicenseView.as_view(), name="delete-license"),
    path("get-trial", views.IssueTrialView.as_view(), name="get-trial"),
    path("list-licenses", views.ListLicensesView.as_view(), name="list-licenses"),
]
