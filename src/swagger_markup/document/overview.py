"""Overview document: API title, version, contact, license, URI scheme and tags."""

from swagger_markup.markup.builder import MarkupDocBuilder

from .base import CONSUMES, PRODUCES, TAGS, MarkupDocument

OVERVIEW = "Overview"
CURRENT_VERSION = "Version"
VERSION = "Version: "
CONTACT_INFORMATION = "Contact information"
CONTACT_NAME = "Contact: "
CONTACT_EMAIL = "Contact Email: "
LICENSE_INFORMATION = "License information"
LICENSE = "License: "
LICENSE_URL = "License URL: "
TERMS_OF_SERVICE = "Terms of service: "
URI_SCHEME = "URI scheme"
HOST = "Host: "
BASE_PATH = "BasePath: "
SCHEMES = "Schemes: "


class OverviewDocument(MarkupDocument):
    name = "overview"

    def render(self, builder: MarkupDocBuilder) -> None:
        info = self.document.info
        builder.document_title(info.title)
        builder.section_title(1, OVERVIEW)
        if info.description.strip():
            builder.paragraph(info.description)
        self._version(builder)
        self._contact(builder)
        self._license(builder)
        self._uri_scheme(builder)
        self._tags(builder)
        for title, media_types in ((CONSUMES, self.document.consumes), (PRODUCES, self.document.produces)):
            if media_types:
                builder.section_title(2, title)
                builder.unordered_list(media_types)

    def _version(self, builder: MarkupDocBuilder) -> None:
        version = self.document.info.version
        if version.strip():
            builder.section_title(2, CURRENT_VERSION)
            builder.paragraph(VERSION + version)

    def _contact(self, builder: MarkupDocBuilder) -> None:
        contact = self.document.info.contact
        if contact is None or not (contact.name or contact.email):
            return
        builder.section_title(2, CONTACT_INFORMATION)
        if contact.name:
            builder.text_line(CONTACT_NAME + contact.name)
        if contact.email:
            builder.text_line(CONTACT_EMAIL + contact.email)
        builder.new_line()

    def _license(self, builder: MarkupDocBuilder) -> None:
        info = self.document.info
        license_ = info.license
        has_license = license_ is not None and bool(license_.name or license_.url)
        if not (has_license or info.terms_of_service):
            return
        builder.section_title(2, LICENSE_INFORMATION)
        if has_license and license_.name:
            builder.text_line(LICENSE + license_.name)
        if has_license and license_.url:
            builder.text_line(LICENSE_URL + license_.url)
        if info.terms_of_service:
            builder.text_line(TERMS_OF_SERVICE + info.terms_of_service)
        builder.new_line()

    def _uri_scheme(self, builder: MarkupDocBuilder) -> None:
        doc = self.document
        if not (doc.host or doc.base_path or doc.schemes):
            return
        builder.section_title(2, URI_SCHEME)
        if doc.host:
            builder.text_line(HOST + doc.host)
        if doc.base_path:
            builder.text_line(BASE_PATH + doc.base_path)
        if doc.schemes:
            builder.text_line(SCHEMES + ", ".join(doc.schemes))
        builder.new_line()

    def _tags(self, builder: MarkupDocBuilder) -> None:
        tags = self.document.tags
        if not tags:
            return
        builder.section_title(2, TAGS)
        builder.unordered_list([
            f"{tag.name}: {tag.description}" if tag.description else tag.name
            for tag in tags
        ])
