class SignalDescriptor:
    """Return `$Namespace.field` on the class, real value on an instance."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def __get__(self, instance, owner):
        #  class access  →  owner is the view-model class, instance is None
        if instance is None:
            ns = getattr(owner, "namespace", None) or owner.__name__
            return f"${ns}.{self.field_name}"

        #  instance access  →  behave like a normal attribute
        return getattr(instance, self.field_name)

    def __repr__(self):
        return f"SignalDescriptor({self.field_name})"
