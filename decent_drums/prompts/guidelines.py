"""Preset-building guideline texts served as MCP prompts.

``{sample_directory}`` is filled in from the prompt argument when the client
supplies one.
"""

PRESET_GUIDELINES = """\
Guidelines for building DecentSampler drum presets with this server.
Reference: https://decentsampler-developers-guide.readthedocs.io/en/stable/

Preset layout (.dspreset): <ui> with a <keyboard>, then optional <buses>,
then <groups>, then optional global <effects>.

Groups
- One group per drum piece. Put every mic position, velocity layer and
  round-robin variation of a piece into that group so voices do not fight.
- Choke pairs (open/closed hi-hat) use muting tags: tags names the piece,
  silencedByTags names the pieces that cut it off.
- Use standard General MIDI notes: Kick 36, Snare 38, Closed Hat 42,
  Open Hat 46, Crash 49, Ride 51.

Samples
- Always use absolute paths.
- Velocity layers pair with samples by position inside a piece: list the
  softest sample first when layers go from soft to hard.
- Run analyze_wav_samples first; sampleLength is the frame count to use as
  the end marker.

Workflow
1. analyze_wav_samples on every file.
2. Optional fragments: configure_drum_controls (pitch/ADSR),
   configure_round_robin (sample alternation), configure_mic_routing (buses).
3. merge_drum_kit_configs to combine the fragments with your drum pieces.
4. generate_drum_groups on the merged kit and paste the XML into the preset.
"""

SIMPLE_PRESET_GUIDELINES = """\
Build a simple DecentSampler drum preset from every sample in {sample_directory}.
List the directory exhaustively before starting.

Use generate_drum_groups with a basic kit: drum pieces with name, rootNote
and sample paths, plus velocityLayers only when the file names show
velocity variations. Do not add drumControls, micBuses, muting, UI
controls or effects unless asked. If the user asks for round robin, use
configure_round_robin ("round_robin" unless told otherwise) and merge the
result with merge_drum_kit_configs.

The <ui> section holds only a <keyboard>; color only keys that have a
sample mapped. If the folder has several mic positions or other complex
material, ask the user how to proceed instead of guessing.
"""

ADVANCED_PRESET_GUIDELINES = """\
Build an advanced DecentSampler drum preset from every sample in {sample_directory}.

Tools and what they return:
- configure_drum_controls {{"drums": [{{"name", "rootNote", "pitch"?, "envelope"?}}]}}
  returns globalSettings.drumControls plus sample-less drum pieces.
- configure_round_robin {{"directory", "mode", "length"?, "groups": [...]}}
  checks sequence positions and that files exist; returns roundRobin settings
  and drum pieces with their samples.
- configure_mic_routing {{"micBuses": [...], "drumPieces": [...]}} checks bus
  targets, volume ranges and every sample's micConfig.busIndex.
- merge_drum_kit_configs {{"configs": [...]}} combines the fragments; later
  fragments win, empty sample lists never erase samples.
- generate_drum_groups renders the merged kit.

Rules:
- Do not add effects, ADSR envelopes or mic buses unless the user asks.
- Samples routed to a bus through micConfig render without note or velocity
  mapping; keep note-mapped samples for playable layers.
- Save the finished preset with the .dspreset extension.
"""
