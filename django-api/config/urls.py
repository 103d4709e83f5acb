from django.contrib import admin
from django.urls import include, path

from bookings.handlers.views import RootView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("bookings.urls")),
    path("", RootView.as_view(), name="root"),
]
