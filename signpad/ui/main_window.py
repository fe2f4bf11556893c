"""Main application window hosting the signature form."""
import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Gtk, Adw, GLib
import logging
from pathlib import Path

from ..core.config import SignpadConfig, load_config
from ..core.document import DocumentRenderer, PageLayout, create_signature_pad
from ..core.export import DocumentExporter, EXPORT_SUCCESS_MESSAGE, export_filename
from ..core.form import ApplicationForm, FormController, today
from ..core.submissions import SubmissionStore
from .document_view import DocumentView

logger = logging.getLogger(__name__)


class MainWindow(Adw.ApplicationWindow):
    """Form entries on top, the scaled page below."""

    def __init__(self, app, config: SignpadConfig = None):
        super().__init__(application=app)

        self.app = app
        self.config = config or load_config()

        layout = PageLayout()
        self.form = ApplicationForm(date=today(self.config.date_format))
        self.pad = create_signature_pad(self.config, layout)
        self.store = SubmissionStore(str(self.config.store_path))
        self.renderer = DocumentRenderer(self.form, self.pad, layout)
        self.exporter = DocumentExporter(self.renderer, scale=self.config.export_scale)
        self.controller = FormController(self.form, self.pad, self.store, self.config)

        self.controller.on_message = self.show_error
        self.controller.on_submitted = self.on_submitted
        self.exporter.notify = self.on_export_notify

        self.set_title("Application Form")
        self.set_default_size(900, 1000)

        self.setup_ui()

        self.pad.on_focus_request = self.name_entry.grab_focus

        GLib.idle_add(self.name_entry.grab_focus)
        logger.info("MainWindow initialized")

    def setup_ui(self):
        """Build the user interface."""
        main_container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)

        header = Adw.HeaderBar()
        main_container.append(header)

        fields = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        fields.set_margin_start(10)
        fields.set_margin_end(10)
        fields.set_margin_top(8)
        fields.set_margin_bottom(8)

        self.name_entry = Gtk.Entry()
        self.name_entry.set_placeholder_text("Name")
        self.name_entry.set_hexpand(True)
        self.name_entry.connect('changed', self.on_name_changed)
        fields.append(self.name_entry)

        self.affiliation_entry = Gtk.Entry()
        self.affiliation_entry.set_placeholder_text("Affiliation")
        self.affiliation_entry.set_hexpand(True)
        self.affiliation_entry.connect('changed', self.on_affiliation_changed)
        fields.append(self.affiliation_entry)

        self.privacy_check = Gtk.CheckButton(label="I agree")
        self.privacy_check.connect('toggled', self.on_privacy_toggled)
        fields.append(self.privacy_check)

        main_container.append(fields)

        self.document_view = DocumentView(self.renderer, self.pad)
        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        scrolled.set_child(self.document_view)
        main_container.append(scrolled)

        bottom_bar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        bottom_bar.set_margin_start(10)
        bottom_bar.set_margin_end(10)
        bottom_bar.set_margin_top(6)
        bottom_bar.set_margin_bottom(6)

        self.status_label = Gtk.Label(label="Ready")
        self.status_label.set_hexpand(True)
        self.status_label.set_xalign(0)
        bottom_bar.append(self.status_label)

        submit_button = Gtk.Button(label="Submit")
        submit_button.add_css_class("suggested-action")
        submit_button.connect('clicked', lambda b: self.controller.submit())
        bottom_bar.append(submit_button)

        main_container.append(bottom_bar)
        self.set_content(main_container)

    def on_name_changed(self, entry):
        """Mirror the name onto the page's signature line."""
        self.form.name = entry.get_text()
        self.document_view.queue_draw()

    def on_affiliation_changed(self, entry):
        self.form.affiliation = entry.get_text()
        self.document_view.queue_draw()

    def on_privacy_toggled(self, check):
        self.form.privacy_agree = check.get_active()
        self.document_view.queue_draw()

    def on_submitted(self, record):
        """Show the success dialog with download and close actions."""
        self.status_label.set_text(f"Submitted: {record['name']}")

        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            message_type=Gtk.MessageType.INFO,
            buttons=Gtk.ButtonsType.NONE,
            text="Application submitted"
        )
        dialog.set_property('secondary-text', 'Your application has been received.')
        dialog.add_button("Close", Gtk.ResponseType.CLOSE)
        download_button = dialog.add_button("Download PDF", Gtk.ResponseType.ACCEPT)
        download_button.add_css_class("suggested-action")
        dialog.connect('response', self.on_success_response)
        dialog.present()

    def on_success_response(self, dialog, response):
        if response == Gtk.ResponseType.ACCEPT:
            # Keep the dialog open so the user can still close it afterwards
            self.on_download_pdf()
            return

        dialog.destroy()
        self.reset_form()

    def on_download_pdf(self):
        """Ask for a destination and export the page."""
        dialog = Gtk.FileChooserDialog(
            title="Save PDF",
            transient_for=self,
            action=Gtk.FileChooserAction.SAVE,
        )
        dialog.add_button("Cancel", Gtk.ResponseType.CANCEL)
        dialog.add_button("Save", Gtk.ResponseType.ACCEPT)

        filter_pdf = Gtk.FileFilter()
        filter_pdf.set_name("PDF Documents")
        filter_pdf.add_pattern("*.pdf")
        dialog.add_filter(filter_pdf)

        dialog.set_current_name(export_filename(self.form.name))
        dialog.connect('response', self.on_download_pdf_response)
        dialog.present()

    def on_download_pdf_response(self, dialog, response):
        if response == Gtk.ResponseType.ACCEPT:
            filepath = dialog.get_file().get_path()
            if not filepath.endswith('.pdf'):
                filepath += '.pdf'

            if self.exporter.export(filepath):
                self.status_label.set_text(f"Exported: {Path(filepath).name}")
            self.document_view.queue_draw()

        dialog.destroy()

    def on_export_notify(self, message: str):
        if message == EXPORT_SUCCESS_MESSAGE:
            # Let the file chooser close before announcing
            GLib.timeout_add(self.config.notify_delay_ms, self._show_info_once, message)
        else:
            self.show_error(message)

    def _show_info_once(self, message: str):
        self.show_info(message)
        return False  # Don't repeat

    def reset_form(self):
        """Start a fresh application."""
        self.controller.reset()
        self.name_entry.set_text("")
        self.affiliation_entry.set_text("")
        self.privacy_check.set_active(False)
        self.status_label.set_text("Ready")
        self.document_view.queue_draw()

    def show_info(self, message: str):
        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            message_type=Gtk.MessageType.INFO,
            buttons=Gtk.ButtonsType.OK,
            text=message
        )
        dialog.connect('response', lambda d, r: d.destroy())
        dialog.present()

    def show_error(self, message: str):
        """Show an error dialog."""
        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            message_type=Gtk.MessageType.ERROR,
            buttons=Gtk.ButtonsType.OK,
            text="Error"
        )
        dialog.set_property('secondary-text', message)
        dialog.connect('response', lambda d, r: d.destroy())
        dialog.present()