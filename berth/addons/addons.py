"""Compose a service's addons directory into one nested stack template."""
from typing import Optional, Union

from berth.addons.aggregator import aggregate
from berth.addons.errors import AddonsDirNotFoundError
from berth.addons.renderer import RenderMode, TemplateRenderer, render_addons
from berth.addons.validator import validate_no_missing_files
from berth.core.config import get_config
from berth.core.logger import get_logger
from berth.core.workspace import Workspace

logger = get_logger(__name__)

# Name of the nested stack resource that holds the addons template
STACK_NAME = "AddonsStack"


class Addons:
    """Additional resources for a service.

    Holds only the service name and its collaborators, so ``template()`` can
    be called any number of times with the same result for unchanged files.
    """

    def __init__(
        self,
        svc_name: str,
        ws: Optional[Workspace] = None,
        renderer: Optional[TemplateRenderer] = None,
        render_mode: Optional[Union[RenderMode, str]] = None,
    ):
        """Initialize addons for a service.

        Args:
            svc_name: Service whose addons directory is composed
            ws: Workspace reader. Discovered from the cwd when omitted.
            renderer: Render primitive. Defaults to the packaged templates.
            render_mode: "lines" or "blocks". Defaults to config value.

        Raises:
            WorkspaceNotFoundError: If ``ws`` is omitted and no workspace is found
        """
        self.svc_name = svc_name
        self.ws = ws if ws is not None else Workspace.discover()
        self.renderer = renderer or TemplateRenderer()
        self.render_mode = RenderMode(render_mode or get_config().render_mode)

    def template(self) -> str:
        """Merge the files under the service's addons directory into a template.

        Returns:
            Rendered template text

        Raises:
            AddonsDirNotFoundError: If the addons directory can't be listed
            AddonsFileReadError: If any addon file can't be read
            MissingAddonsFilesError: If parameters, outputs or resources are missing
            jinja2.TemplateError: If rendering fails
        """
        try:
            file_names = self.ws.read_addons_dir(self.svc_name)
        except OSError as e:
            raise AddonsDirNotFoundError(self.svc_name, e) from e

        logger.debug(f"Found {len(file_names)} file(s) in addons for {self.svc_name}")

        aggregated = aggregate(self.ws, self.svc_name, file_names)
        validate_no_missing_files(aggregated)
        return render_addons(self.renderer, self.svc_name, aggregated, self.render_mode)
