from rest_framework import permissions


class IsFoodEditor(permissions.BasePermission):
    """
    Staff users, or users holding the change permission of the model behind the view
    """
    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        if user.is_staff or user.is_superuser:
            return True

        queryset = getattr(view, 'queryset', None)
        if queryset is None:
            return False

        opts = queryset.model._meta
        return user.has_perm(f'{opts.app_label}.change_{opts.model_name}')


class ReadAuthenticatedWriteEditor(permissions.BasePermission):
    """
    Safe methods for any authenticated user, writes for food editors only
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return IsFoodEditor().has_permission(request, view)
