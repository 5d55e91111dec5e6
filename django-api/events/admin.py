from django.contrib import admin

from events.models import Event, Registration


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    fields = ["position", "email", "name", "registered_at"]
    readonly_fields = ["position", "email", "name", "registered_at"]

    # Registrations are only admitted through the API.
    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "held_on", "number_of_seats", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["name"]
    readonly_fields = ["held_on", "name", "status"]
    inlines = [RegistrationInline]

    # New events need the future-date check, which only the API runs.
    def has_add_permission(self, request):
        return False


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "event", "registered_at"]
    list_filter = ["event"]
    search_fields = ["email", "name"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
