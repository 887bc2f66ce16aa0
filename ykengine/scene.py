"""Scenes, scene factories and the manager that switches between scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional


class BaseScene(ABC):
    """A game scene driven by a :class:`SceneManager`."""

    scene_manager: Optional["SceneManager"] = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene; called once when it becomes current."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Render the scene."""

    @abstractmethod
    def finalize(self) -> None:
        """Release what the scene holds."""


class AbstractSceneFactory(ABC):
    """Creates scenes by name."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        """Return a new scene for ``scene_name``, or None if there is none."""


SceneType = Callable[[], BaseScene]


class SceneFactory(AbstractSceneFactory):
    """A factory built from a table of scene names and scene constructors."""

    def __init__(self, scenes: Mapping[str, SceneType] | None = None) -> None:
        self._scenes: dict[str, SceneType] = {}
        for name, scene_type in (scenes or {}).items():
            self.register(name, scene_type)

    def register(self, scene_name: str, scene_type: SceneType) -> None:
        """Make ``scene_name`` create scenes with ``scene_type()``."""
        if not callable(scene_type):
            raise TypeError("scene_type must be callable")
        self._scenes[scene_name] = scene_type

    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        scene_type = self._scenes.get(scene_name)
        return None if scene_type is None else scene_type()


class SceneManager:
    """Holds the running scene and switches to a requested one between frames."""

    def __init__(self, scene_factory: AbstractSceneFactory | None = None) -> None:
        self.scene_factory = scene_factory
        self._scene: Optional[BaseScene] = None
        self._next_scene: Optional[BaseScene] = None

    @property
    def current_scene(self) -> Optional[BaseScene]:
        return self._scene

    @property
    def pending_scene(self) -> Optional[BaseScene]:
        return self._next_scene

    def _switch_to_next(self) -> None:
        scene = self._next_scene
        self._next_scene = None
        self._scene = scene
        scene.scene_manager = self
        scene.initialize()

    def change_scene(self, scene_name: str) -> None:
        """Request a switch to ``scene_name``.

        With no running scene the switch happens at once; otherwise it
        happens at the start of the next :meth:`update`.
        """
        if self.scene_factory is None:
            raise RuntimeError("no scene factory set")
        if self._next_scene is not None:
            raise RuntimeError("a scene change is already pending")
        scene = self.scene_factory.create_scene(scene_name)
        if scene is None:
            raise KeyError(f"unknown scene {scene_name!r}")
        self._next_scene = scene
        if self._scene is None:
            self._switch_to_next()

    def _require_scene(self) -> BaseScene:
        if self._scene is None:
            raise RuntimeError("no scene is running")
        return self._scene

    def update(self) -> None:
        """Apply a pending scene change, then update the running scene."""
        if self._next_scene is not None:
            self._switch_to_next()
        self._require_scene().update()

    def draw(self) -> None:
        """Draw the running scene."""
        self._require_scene().draw()

    def finalize(self) -> None:
        """Release the running and pending scenes."""
        self._scene = None
        self._next_scene = None