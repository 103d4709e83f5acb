from django import forms
from django.contrib import admin
from django.contrib.auth.hashers import make_password

from bookings.models import Booking, Room, User
from bookings.services.auth_service import MIN_PASSWORD_LENGTH


class UserAdminForm(forms.ModelForm):
    """Edits a user; the password is hashed and only replaced when given."""

    new_password = forms.CharField(
        label="Password",
        widget=forms.PasswordInput,
        required=False,
        strip=False,
        help_text="Leave blank to keep the current password.",
    )

    class Meta:
        model = User
        fields = ["name", "email", "role"]

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()

    def clean_new_password(self):
        password = self.cleaned_data.get("new_password")
        if not password and not self.instance.password:
            raise forms.ValidationError("A password is required for new users.")
        if password and len(password) < MIN_PASSWORD_LENGTH:
            raise forms.ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
            )
        return password

    def save(self, commit=True):
        user = super().save(commit=False)
        if self.cleaned_data.get("new_password"):
            user.password = make_password(self.cleaned_data["new_password"])
        if commit:
            user.save()
        return user


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ["room_id", "date", "start_time", "end_time", "purpose", "status"]


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    form = UserAdminForm
    list_display = ["name", "email", "role", "created_at"]
    list_filter = ["role"]
    search_fields = ["name", "email"]
    inlines = [BookingInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "capacity", "available", "created_at"]
    list_filter = ["type", "available"]
    search_fields = ["name", "description"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["date", "start_time", "end_time", "room_id", "user", "status"]
    list_filter = ["status", "date"]
    search_fields = ["purpose", "user__name", "user__email"]
