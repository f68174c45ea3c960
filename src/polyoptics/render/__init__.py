""" Package for Monte Carlo rendering through a lens transform

    The :mod:`~.render` subpackage turns an input radiance image into the
    image formed by the lens. These include:

        - The rendering constants and their JSON persistence,
          :mod:`~.renderspec`
        - The spectral transform: focus, wavelength interpolation and the
          exit angle term, :mod:`~.spectralsystem`
        - Wavelength bins and their rgb weights, :mod:`~.spectralsampling`
        - The floating point image buffer, :mod:`~.image`
        - Aperture, jitter and sample budget helpers, :mod:`~.sampler`
        - The renderer itself, :mod:`~.montecarlo`
        - Gamut correction of the rendered image, :mod:`~.gamut`
"""
