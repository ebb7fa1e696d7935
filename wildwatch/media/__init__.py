"""
Media relay package.

Takes one uploaded file through the relay:

- temporary storage with guaranteed cleanup
- image → distress assessment (vision chat completion)
- voice recording → transcript (speech-to-text) → screening → classification

Nothing in here knows about Flask; the blueprint in `wildwatch.api.relay`
feeds RelayJob objects in and turns them back into JSON.
"""
