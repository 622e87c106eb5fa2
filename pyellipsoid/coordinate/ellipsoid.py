# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Ellipsoid and earth model containers"""

import logging
from dataclasses import dataclass, field

import numpy as np

from ..core.constants import RE_GRS80, RE_WGS84, RP_GRS80, RP_WGS84
from ..core.data_structures import LPA, XYZ
from .shape import Shape
from .transforms import lpa_for_xyz, lpas_for_xyzs, xyz_for_lpa, xyzs_for_lpas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ellipsoid:
    """A shape together with constants derived from it

    Attributes
    ----------
    shape : Shape
        Surface geometry
    radius : float
        Representative (mean) radius, the average of the three semi-axes
        (m). Used to seed sampling ranges and scale diagnostics; the
        transforms themselves do not use it.
    """
    shape: Shape
    radius: float = field(init=False)

    def __post_init__(self):
        if not isinstance(self.shape, Shape):
            raise TypeError(f"Ellipsoid requires a Shape, got {type(self.shape).__name__}")
        object.__setattr__(self, 'radius', float(np.mean(self.shape.radii)))

    @property
    def normalized_shape(self) -> Shape:
        """Shape scaled so that the representative radius is one"""
        return self.shape.normalized(self.radius)


class EarthModel:
    """Binds an ellipsoid to the coordinate transforms

    An earth model is the unit of configuration an application holds. It
    is immutable and may be shared freely between threads; every transform
    is a pure function of the model and its input coordinate.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Working ellipsoid used by all transforms

    Examples
    --------
    >>> model = EarthModel.wgs84()
    >>> xyz = model.xyz_for_lpa(LPA(0.0, 0.0, 0.0))
    >>> lpa = model.lpa_for_xyz(xyz)
    """

    __slots__ = ('_ellipsoid',)

    def __init__(self, ellipsoid: Ellipsoid):
        if not isinstance(ellipsoid, Ellipsoid):
            raise TypeError(f"EarthModel requires an Ellipsoid, got {type(ellipsoid).__name__}")
        object.__setattr__(self, '_ellipsoid', ellipsoid)
        logger.debug(f"EarthModel created: {ellipsoid.shape!r}, radius={ellipsoid.radius:.3f} m")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_shape(cls, shape: Shape) -> "EarthModel":
        """Create a model directly from a shape"""
        return cls(Ellipsoid(shape))

    @classmethod
    def from_radii(cls, rad_x: float, rad_y: float, rad_z: float) -> "EarthModel":
        """Create a model from three semi-axis radii (m)"""
        return cls.from_shape(Shape.from_radii(rad_x, rad_y, rad_z))

    @classmethod
    def wgs84(cls) -> "EarthModel":
        """Model for the WGS84 reference ellipsoid"""
        return cls.from_shape(Shape.from_axes(RE_WGS84, RP_WGS84))

    @classmethod
    def grs80(cls) -> "EarthModel":
        """Model for the GRS80 reference ellipsoid"""
        return cls.from_shape(Shape.from_axes(RE_GRS80, RP_GRS80))

    @property
    def ellipsoid(self) -> Ellipsoid:
        """Working ellipsoid"""
        return self._ellipsoid

    @property
    def shape(self) -> Shape:
        """Shape of the working ellipsoid"""
        return self._ellipsoid.shape

    def xyz_for_lpa(self, lpa) -> XYZ:
        """Convert geodetic LPA to Cartesian XYZ using this model"""
        return xyz_for_lpa(lpa, self)

    def lpa_for_xyz(self, xyz) -> LPA:
        """Convert Cartesian XYZ to geodetic LPA using this model"""
        return lpa_for_xyz(xyz, self)

    def xyzs_for_lpas(self, lpas) -> np.ndarray:
        """Batch version of ``xyz_for_lpa`` for arrays of shape (N, 3)"""
        return xyzs_for_lpas(lpas, self)

    def lpas_for_xyzs(self, xyzs) -> np.ndarray:
        """Batch version of ``lpa_for_xyz`` for arrays of shape (N, 3)"""
        return lpas_for_xyzs(xyzs, self)

    def __eq__(self, other):
        if not isinstance(other, EarthModel):
            return NotImplemented
        return self._ellipsoid == other._ellipsoid

    def __hash__(self):
        return hash(self._ellipsoid)

    def __repr__(self):
        return f"EarthModel({self.shape!r})"
