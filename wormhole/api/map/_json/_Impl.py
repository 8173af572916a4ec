"""JSON map backend implementation."""

from __future__ import annotations

import json
from contextlib import suppress
from pathlib import Path

from pydantic import ValidationError

from ...config.MapConfig import MapConfig
from ...wormhole.WormholeNode import WormholeNode
from ...wormhole.WormholeResource import WormholeResource
from ...wormhole.WormholeType import WormholeType
from .._AbstractBackend import _AbstractBackend
from ..MapDocument import MapDocument
from ..MapLoadError import MapLoadError
from ..MapNode import MapNode
from ..NodeKind import NodeKind
from ..OtherResource import OtherResource
from ..Resource import Resource
from ._Data import _MapData, _NodeData, _OtherResourceData, _WormholeResourceData


class _Impl(_AbstractBackend):
    """Reads and writes maps as indented JSON documents."""

    def __init__(self, map_config: MapConfig):
        self.indent = map_config.indent

    def read(self, path: Path) -> MapDocument:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise MapLoadError(f"Cannot read map file {path}: {e}") from e

        try:
            data = _MapData.model_validate_json(text)
        except ValidationError as e:
            raise MapLoadError(f"Invalid map file {path}: {e}") from e

        document = MapDocument(data.label, uri=data.uri, file=path)
        for child in data.children:
            document.add_child(self._build_node(child))
        document.modified = False
        return document

    def write(self, document: MapDocument, path: Path) -> None:
        data = _MapData(
            uri=document.uri,
            label=document.label,
            children=[self._node_data(child) for child in document.children],
        )
        text = json.dumps(data.model_dump(by_alias=True, exclude_none=True), indent=self.indent) + "\n"

        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(path.name + ".tmp")
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            with suppress(OSError):
                temp_path.unlink()
            raise

    def _build_node(self, data: _NodeData) -> MapNode:
        kind = NodeKind(data.kind)
        node: MapNode
        if kind is NodeKind.WORMHOLE:
            node = WormholeNode(WormholeType(data.wormhole_type or WormholeType.SOURCE), data.label, uri=data.uri)
        else:
            node = MapNode(data.label, uri=data.uri, kind=kind)
        node.x, node.y = data.x, data.y
        node.width, node.height = data.width, data.height
        if data.resource is not None:
            node.resource = self._build_resource(data.resource)
        for child in data.children:
            node.add_child(self._build_node(child))
        return node

    @staticmethod
    def _build_resource(data: _WormholeResourceData | _OtherResourceData) -> Resource:
        if isinstance(data, _WormholeResourceData):
            return WormholeResource(
                spec=data.spec,
                system_spec=data.system_spec,
                component_uri_string=data.component_uri_string,
                originating_component_uri_string=data.originating_component_uri_string,
                originating_filename=data.originating_filename,
                target_filename=data.target_filename,
            )
        return OtherResource(spec=data.spec, title=data.title)

    def _node_data(self, node: MapNode) -> _NodeData:
        resource = node.resource
        resource_data: _WormholeResourceData | _OtherResourceData | None = None
        if isinstance(resource, WormholeResource):
            resource_data = _WormholeResourceData(
                spec=resource.spec,
                system_spec=resource.system_spec,
                component_uri_string=resource.component_uri_string,
                originating_component_uri_string=resource.originating_component_uri_string,
                originating_filename=resource.originating_filename,
                target_filename=resource.target_filename,
            )
        elif isinstance(resource, OtherResource):
            resource_data = _OtherResourceData(spec=resource.spec, title=resource.title)

        return _NodeData(
            uri=node.uri,
            label=node.label,
            kind=node.kind.value,
            x=node.x,
            y=node.y,
            width=node.width,
            height=node.height,
            children=[self._node_data(child) for child in node.children],
            resource=resource_data,
            wormhole_type=node.wormhole_type.value if isinstance(node, WormholeNode) else None,
        )
