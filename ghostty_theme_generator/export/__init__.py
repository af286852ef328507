from .json_export import export_theme, gallery_banner_color, theme_file_name

__all__ = ["export_theme", "gallery_banner_color", "theme_file_name"]
